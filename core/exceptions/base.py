"""Base exceptions for the bot."""

from typing import Any, Dict, Optional


class BotError(Exception):
    """Base exception for all bot errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize bot error.

        Args:
            message: Error message for logging
            code: Error code for identification
            details: Additional error details
        """
        super().__init__(message)
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ValidationError(BotError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
    ):
        """Initialize validation error."""
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details=details,
        )


class MalformedIngressPayload(ValidationError):
    """Raised when an ingress request body lacks a required field."""


class ConfigurationError(BotError):
    """Raised when there's an issue with bot configuration."""

    def __init__(
        self,
        config_key: str,
        message: Optional[str] = None,
    ):
        """Initialize configuration error."""
        super().__init__(
            message=message or f"Invalid configuration for: {config_key}",
            code="CONFIG_ERROR",
            details={"config_key": config_key},
        )
        self.config_key = config_key


class ConfigurationMissing(ConfigurationError):
    """Raised when a required secret or id is absent at startup."""

    def __init__(self, config_key: str):
        super().__init__(
            config_key=config_key,
            message=f"Missing required configuration: {config_key.upper()}",
        )
