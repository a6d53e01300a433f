"""Invite usage tracking for member join events."""

import asyncio
import logging
from collections import defaultdict
from typing import Dict, Iterable, Mapping, Optional

import discord

from core.exceptions import PermissionDenied, TransientFetchError
from core.models.onboarding import InviteRecord
from utils.platform import DEFAULT_TIMEOUT, platform_call

logger = logging.getLogger(__name__)


class InviteUsageTracker:
    """Caches invite usage counters per guild and detects which one moved.

    Discord does not say which invite a member joined with, so the tracker
    compares a fresh snapshot of all invite counters with the cached one.
    The snapshot, diff and cache update for a guild run under one lock.
    """

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT):
        self.timeout = timeout
        self.uses: Dict[int, Dict[str, int]] = defaultdict(dict)
        self._seeded: set[int] = set()
        self._locks: Dict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    def is_seeded(self, guild_id: int) -> bool:
        return guild_id in self._seeded

    async def snapshot(self, guild: discord.Guild) -> list[InviteRecord]:
        """Fetch the current usage counter of every guild invite."""
        invites = await platform_call(
            guild.invites(), "list guild invites", self.timeout, error_cls=TransientFetchError
        )
        return [InviteRecord(code=invite.code, uses=invite.uses or 0) for invite in invites]

    async def seed(self, guild: discord.Guild) -> bool:
        """Prime the cache before join events are processed.

        On failure the guild stays degraded: diffs report nothing until a
        later snapshot succeeds.
        """
        async with self._locks[guild.id]:
            try:
                records = await self.snapshot(guild)
            except PermissionDenied as e:
                logger.error(f"Bot doesn't have permission to manage invites in guild {guild.id}: {e}")
                return False
            except TransientFetchError as e:
                logger.error(f"Error caching invites for guild {guild.id}: {e}")
                return False
            self._store(guild.id, records)
            self._seeded.add(guild.id)
            logger.info(f"Cached {len(records)} existing invites for guild {guild.id}")
            return True

    @staticmethod
    def diff(previous: Mapping[str, int], current: Iterable[InviteRecord]) -> Optional[str]:
        """Return the invite whose counter increased, if it can be told apart.

        Codes missing from ``previous`` count from zero. The largest positive
        delta wins; a tie for the largest delta is ambiguous and yields None.
        """
        best_code = None
        best_delta = 0
        ambiguous = False

        for record in current:
            delta = record.uses - previous.get(record.code, 0)
            if delta <= 0:
                continue
            if delta > best_delta:
                best_code, best_delta, ambiguous = record.code, delta, False
            elif delta == best_delta:
                ambiguous = True

        if ambiguous:
            logger.warning(f"Several invites increased by {best_delta}, attribution is ambiguous")
            return None
        return best_code

    async def find_used_invite(self, guild: discord.Guild) -> Optional[str]:
        """Snapshot, diff and update the cache as one critical section.

        Raises:
            TransientFetchError: the invite list could not be fetched.
        """
        async with self._locks[guild.id]:
            records = await self.snapshot(guild)

            if guild.id not in self._seeded:
                self._store(guild.id, records)
                self._seeded.add(guild.id)
                logger.warning(f"Invite cache for guild {guild.id} re-seeded, used invite unknown")
                return None

            used_code = self.diff(self.uses[guild.id], records)
            self._store(guild.id, records)
            return used_code

    def record_invite(self, guild_id: int, code: str, uses: Optional[int]) -> None:
        """Track an invite created after seeding."""
        self.uses[guild_id][code] = uses or 0
        logger.info(f"New invite created: {code}")

    def _store(self, guild_id: int, records: Iterable[InviteRecord]) -> None:
        cache = self.uses[guild_id]
        for record in records:
            cache[record.code] = record.uses
