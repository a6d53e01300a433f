"""Repository layer - data access abstraction."""

from .invite_name_repository import InviteNameRegistry

__all__ = [
    "InviteNameRegistry",
]
