"""
Payloads accepted by the ingress HTTP server.
"""

from pydantic import ConfigDict, Field

from .base import BaseModel


class InviteMapPayload(BaseModel):
    """Body of ``POST /invite-map`` sent by the form automation."""

    # Automations may send a numeric code or name
    model_config = ConfigDict(strict=False, coerce_numbers_to_str=True)

    invite_code: str = Field(..., alias="inviteCode", min_length=1)
    firstname: str = Field(..., min_length=1)
