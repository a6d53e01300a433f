"""
Base Pydantic models and validators used across the application.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel as PydanticBaseModel
from pydantic import BeforeValidator, ConfigDict, Field


class BaseModel(PydanticBaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name
        populate_by_name=True,
        # Reject unexpected types instead of coercing them
        strict=True,
    )


def _blank_to_none(value: Any) -> Any:
    """Treat empty environment values as unset."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Type definitions
DiscordID = Annotated[int, Field(gt=0, description="Discord snowflake ID")]

OptionalDiscordID = Annotated[Optional[DiscordID], BeforeValidator(_blank_to_none)]
