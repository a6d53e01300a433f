"""Discord-related exceptions."""

from typing import Optional

from .base import BotError


class DiscordError(BotError):
    """Base exception for Discord API errors."""

    def __init__(
        self,
        message: str,
        action: Optional[str] = None,
        discord_code: Optional[int] = None,
    ):
        """Initialize Discord error."""
        details = {}
        if action:
            details["action"] = action
        if discord_code:
            details["discord_code"] = discord_code

        super().__init__(
            message=message,
            code="DISCORD_ERROR",
            details=details,
        )
        self.action = action


class TransientPlatformError(DiscordError):
    """Raised when an outbound platform call fails, times out or is rate limited."""


class TransientFetchError(TransientPlatformError):
    """Raised when listing guild invites fails."""


class PermissionDenied(DiscordError):
    """Raised when the platform refuses an action for lack of permissions."""
