"""Bounded wrapper around outbound Discord API calls."""

import asyncio
import logging
from typing import Awaitable, Optional, Type, TypeVar

import aiohttp
import discord

from core.exceptions import PermissionDenied, TransientPlatformError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT = 15.0


async def platform_call(
    awaitable: Awaitable[T],
    action: str,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    error_cls: Type[TransientPlatformError] = TransientPlatformError,
) -> T:
    """Await a Discord call, translating its failures into bot errors.

    Raises:
        PermissionDenied: Discord answered 403.
        TransientPlatformError: the call timed out, was rate limited or failed.
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.warning(f"Timed out after {timeout}s: {action}")
        raise error_cls(f"Timed out: {action}", action=action) from e
    except discord.Forbidden as e:
        raise PermissionDenied(f"Missing permissions: {action}", action=action, discord_code=e.code) from e
    except discord.HTTPException as e:
        raise error_cls(f"Discord API error during {action}: {e}", action=action, discord_code=e.code) from e
    except aiohttp.ClientError as e:
        raise error_cls(f"Network error during {action}: {e}", action=action) from e
