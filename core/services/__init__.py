"""Service layer - business logic abstraction."""

from .attribution_service import PLACEHOLDER_NAME, AttributionResolver, member_label

__all__ = [
    # Attribution
    "AttributionResolver",
    "PLACEHOLDER_NAME",
    "member_label",
]
