"""
Configuration schema validation using Pydantic.
"""

from typing import Dict, List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .base import OptionalDiscordID
from .onboarding import TeamMember

# "name" is replaced with the lowercased client name in every entry
CHANNEL_TEMPLATES: Dict[str, List[str]] = {
    "full": [
        "🤝│team-chat",
        "🧲│new-leads-name",
        "ℹ️│typeform-name",
        "🗓│new-calls-name",
        "📈│performance-intelligence",
        "📊│ad-intelligence",
        "🧬│funnel-diagnostics",
        "🗂│swipe-vault",
    ],
    "minimal": [
        "🤝│team-chat",
        "🧲│new-leads-name",
        "🗓│new-calls-name",
    ],
}

TEAM_SLOTS = ("founder", "csm1", "csm2", "fulfilment", "operations")

DEFAULT_FALLBACK_LABELS: Dict[str, str] = {
    "founder": "@Founder",
    "csm1": "@Client Success",
    "csm2": "@Client Success",
    "fulfilment": "@Fulfilment",
    "operations": "@Operations",
    "start_here": "#start-here",
}


class BotConfig(BaseSettings):
    """Main bot configuration with validation."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    # Secrets and ids (environment)
    discord_token: str = Field(..., min_length=1)
    guild_id: OptionalDiscordID = None
    staff_role_id: OptionalDiscordID = None
    start_here_channel_id: OptionalDiscordID = None

    # Team roster (environment)
    founder_user_id: OptionalDiscordID = None
    csm1_user_id: OptionalDiscordID = None
    csm2_user_id: OptionalDiscordID = None
    fulfilment_user_id: OptionalDiscordID = None
    operations_user_id: OptionalDiscordID = None

    # Ingress server
    port: int = Field(default=3000, gt=0, lt=65536)

    # Workspace layout (config.yml)
    channel_template: Literal["full", "minimal"] = "full"
    channel_names: List[str] = Field(default_factory=list)
    entry_channel_marker: str = Field(default="team-chat", min_length=1)
    category_suffix: str = Field(default="Echo Growth", min_length=1)

    # Welcome message (config.yml)
    welcome_variant: Literal["single", "two_part"] = "single"
    team_mention_kind: Literal["user", "role"] = "user"
    fallback_labels: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_FALLBACK_LABELS))

    # Bound for every outbound Discord call, in seconds
    platform_timeout: float = Field(default=15.0, gt=0)

    def channel_name_template(self) -> List[str]:
        """Ordered channel names to create for each client."""
        if self.channel_names:
            return list(self.channel_names)
        return list(CHANNEL_TEMPLATES[self.channel_template])

    def fallback_label(self, key: str) -> str:
        return self.fallback_labels.get(key) or DEFAULT_FALLBACK_LABELS[key]

    def team_roster(self) -> List[TeamMember]:
        """Mentions for every team slot, falling back to literal labels."""
        prefix = "<@&" if self.team_mention_kind == "role" else "<@"
        roster = []
        for slot in TEAM_SLOTS:
            member_id: Optional[int] = getattr(self, f"{slot}_user_id")
            if member_id:
                mention = f"{prefix}{member_id}>"
            else:
                mention = self.fallback_label(slot)
            roster.append(TeamMember(key=slot, mention=mention))
        return roster

    def start_here_ref(self) -> str:
        if self.start_here_channel_id:
            return f"<#{self.start_here_channel_id}>"
        return self.fallback_label("start_here")
