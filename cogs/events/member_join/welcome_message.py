"""Welcome message functionality for new clients."""

import logging
from typing import Dict, Optional, Sequence

import discord
from discord import AllowedMentions

from core.exceptions import BotError
from core.models.config import BotConfig
from core.models.onboarding import ClientIdentity, TeamMember
from utils.platform import platform_call

logger = logging.getLogger(__name__)

WELCOME_INTRO = """
✨ **Welcome to Echo Growth!**

Hey {member}, we're genuinely excited to have you here.
You've partnered with a team that will help you scale your agency, coaching or consulting business.

We'll work with you to refine your offer, build your ads and funnel, set up the right automations and launch campaigns that move the needle.
""".strip()

WELCOME_TEAM = """
👥 **Meet Your Team**

{founder} – **Founder**
Guides your strategy, offer and overall growth direction.

{csm1} & {csm2} – **Client Success Managers**
Your day-to-day support whenever you need clarity or direction.

{fulfilment} – **Fulfilment Manager**
Oversees scripts, ads, funnels and creative.

{operations} – **Operations Manager**
Keeps onboarding and fulfilment running smoothly.

**Creative & Tech Team**
Editing, builds, automations and optimisation behind the scenes.

⸻

You've got a full team behind you.
Ask questions anytime, share updates as you go and use this Discord as your direct line to us.

**Next step:** Head over to {start_here} and complete your intake form so we can tailor your onboarding.

We're looking forward to growing with you. 🚀
""".strip()

SEPARATOR = "\n\n⸻\n\n"


def render_welcome(
    variant: str,
    member_mention: str,
    roster: Sequence[TeamMember],
    start_here: str,
) -> list[str]:
    """Render the welcome message as one or two ordered parts."""
    values: Dict[str, str] = {slot.key: slot.mention for slot in roster}
    values["member"] = member_mention
    values["start_here"] = start_here

    intro = WELCOME_INTRO.format(**values)
    team = WELCOME_TEAM.format(**values)

    if variant == "two_part":
        return [intro, team]
    return [intro + SEPARATOR + team]


class OnboardingMessenger:
    """Sends the welcome broadcast to a client's entry channel."""

    def __init__(self, config: BotConfig):
        self.config = config

    async def send(
        self,
        entry_channel: discord.abc.Messageable,
        identity: ClientIdentity,
        member: discord.Member,
        team_roster: Optional[Sequence[TeamMember]] = None,
        start_here_ref: Optional[str] = None,
    ) -> bool:
        """Send every part in order; a failed part stops the rest.

        Errors are logged, never raised, so the workspace stays as created.
        """
        roster = team_roster if team_roster is not None else self.config.team_roster()
        start_here = start_here_ref if start_here_ref is not None else self.config.start_here_ref()
        parts = render_welcome(self.config.welcome_variant, member.mention, roster, start_here)

        for index, content in enumerate(parts, start=1):
            try:
                await platform_call(
                    entry_channel.send(
                        content,
                        allowed_mentions=AllowedMentions(everyone=False, users=True, roles=True),
                    ),
                    f"send welcome part {index}/{len(parts)}",
                    self.config.platform_timeout,
                )
            except BotError as e:
                logger.error(f"Error sending welcome message for {identity.display_name}: {e}")
                return False

        logger.info(f"Sent welcome message for {identity.display_name} ({len(parts)} part(s))")
        return True
