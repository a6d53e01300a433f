"""
Models for configuration, ingress payloads and onboarding values.
"""

from .base import BaseModel, DiscordID, OptionalDiscordID
from .config import BotConfig
from .ingress import InviteMapPayload
from .onboarding import ClientIdentity, InviteRecord, TeamMember, Workspace

__all__ = [
    # Base models
    "BaseModel",
    "DiscordID",
    "OptionalDiscordID",
    # Config models
    "BotConfig",
    # Ingress models
    "InviteMapPayload",
    # Onboarding values
    "InviteRecord",
    "ClientIdentity",
    "TeamMember",
    "Workspace",
]
