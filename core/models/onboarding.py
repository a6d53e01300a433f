"""Value objects passed along the onboarding pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class InviteRecord:
    """Observed usage counter of one guild invite."""

    code: str
    uses: int = 0


@dataclass(frozen=True)
class ClientIdentity:
    """Display identity resolved for a newly joined client."""

    display_name: str
    source_invite_code: Optional[str] = None


@dataclass(frozen=True)
class TeamMember:
    """One slot of the welcome message team roster."""

    key: str
    mention: str


@dataclass
class Workspace:
    """Resources created for one client during a join event."""

    owner_member_id: int
    category_id: int
    channel_ids: list[int] = field(default_factory=list)
    entry_channel_id: Optional[int] = None
    entry_channel: Any = field(default=None, repr=False, compare=False)
