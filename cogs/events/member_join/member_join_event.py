"""Main member join event handler."""

import logging
from typing import Optional

import discord
from discord.ext import commands, tasks

from core.exceptions import BotError
from core.models.onboarding import Workspace
from core.services.attribution_service import AttributionResolver

from .invite_tracker import InviteUsageTracker
from .welcome_message import OnboardingMessenger
from .workspace_provisioner import WorkspaceProvisioner

logger = logging.getLogger(__name__)


class OnMemberJoinEvent(commands.Cog):
    """Attributes new members to their invite and builds their client workspace."""

    def __init__(self, bot):
        self.bot = bot
        self.guild: Optional[discord.Guild] = None

        config = bot.config
        self.invite_tracker = InviteUsageTracker(timeout=config.platform_timeout)
        self.resolver = AttributionResolver()
        self.provisioner = WorkspaceProvisioner(bot, config)
        self.messenger = OnboardingMessenger(config)

    async def cog_load(self):
        self.setup_guild.start()

    async def cog_unload(self):
        """Clean up when cog is unloaded."""
        self.setup_guild.cancel()

    @tasks.loop(count=1)
    async def setup_guild(self):
        """Seed the invite cache once the bot is ready."""
        logger.info("Waiting for bot to be ready...")
        await self.bot.wait_until_ready()

        self.guild = self.bot.resolve_guild()
        if self.guild is None:
            logger.warning("No guild found. Invite caching skipped.")
            return

        logger.info(f"Guild set: {self.guild.name}")
        await self.invite_tracker.seed(self.guild)

    def _is_tracked_guild(self, guild: Optional[discord.Guild]) -> bool:
        if guild is None:
            return False
        guild_id = self.bot.config.guild_id
        return guild_id is None or guild.id == guild_id

    @commands.Cog.listener()
    async def on_member_join(self, member: discord.Member):
        """Handle member join event."""
        if not self._is_tracked_guild(member.guild):
            return

        logger.info(f"Member joined: {member} (ID: {member.id})")
        try:
            await self.onboard(member)
        except BotError as e:
            logger.error(f"Error in on_member_join for {member.id}: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error in on_member_join for {member.id}: {e}")

    async def onboard(self, member: discord.Member) -> Workspace:
        """Run the full attribution and provisioning pipeline for one member."""
        guild = member.guild

        used_code = await self.invite_tracker.find_used_invite(guild)
        identity = self.resolver.resolve(used_code, self.bot.invite_names.get, member)

        workspace = await self.provisioner.provision(guild, member, identity)

        if workspace.entry_channel is not None:
            config = self.bot.config
            await self.messenger.send(
                workspace.entry_channel,
                identity,
                member,
                config.team_roster(),
                config.start_here_ref(),
            )

        logger.info(f"Created category + channels for {identity.display_name}")
        return workspace

    @commands.Cog.listener()
    async def on_invite_create(self, invite: discord.Invite):
        """Handle invite creation."""
        if not self._is_tracked_guild(invite.guild):
            return

        if self.invite_tracker.is_seeded(invite.guild.id):
            self.invite_tracker.record_invite(invite.guild.id, invite.code, invite.uses)
