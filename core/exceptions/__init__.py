"""Core exceptions for the bot."""

from .base import (
    BotError,
    ConfigurationError,
    ConfigurationMissing,
    MalformedIngressPayload,
    ValidationError,
)
from .discord import DiscordError, PermissionDenied, TransientFetchError, TransientPlatformError

__all__ = [
    # Base
    "BotError",
    "ValidationError",
    "MalformedIngressPayload",
    "ConfigurationError",
    "ConfigurationMissing",
    # Discord
    "DiscordError",
    "TransientPlatformError",
    "TransientFetchError",
    "PermissionDenied",
]
