"""Private client workspace creation for new members."""

import logging
from typing import Dict, Sequence, Union

import discord

from core.models.config import BotConfig
from core.models.onboarding import ClientIdentity, Workspace
from utils.platform import platform_call

logger = logging.getLogger(__name__)

NAME_TOKEN = "name"

OverwriteTarget = Union[discord.Role, discord.Member, discord.Object]


def render_channel_name(template: str, display_name: str) -> str:
    """Replace the first ``name`` token with the lowercased client name."""
    return template.replace(NAME_TOKEN, display_name.lower(), 1)


class WorkspaceProvisioner:
    """Creates the category, its overwrites and the client's channels.

    Steps run strictly in order. A failure stops provisioning and leaves
    whatever was already created in place.
    """

    def __init__(self, bot, config: BotConfig):
        self.bot = bot
        self.config = config

    @property
    def template(self) -> Sequence[str]:
        return self.config.channel_name_template()

    def category_name(self, identity: ClientIdentity) -> str:
        return f"{identity.display_name} - {self.config.category_suffix}"

    def build_overwrites(
        self, guild: discord.Guild, member: discord.Member
    ) -> Dict[OverwriteTarget, discord.PermissionOverwrite]:
        """Hide the workspace from everyone except the client, the bot and staff."""
        allow = discord.PermissionOverwrite(view_channel=True, send_messages=True)

        overwrites: Dict[OverwriteTarget, discord.PermissionOverwrite] = {
            guild.default_role: discord.PermissionOverwrite(view_channel=False),
            member: allow,
            self._bot_principal(guild): allow,
        }

        staff_role_id = self.config.staff_role_id
        if staff_role_id:
            staff_role = guild.get_role(staff_role_id)
            if staff_role is None:
                logger.warning(f"Staff role {staff_role_id} not cached, using its id directly")
                staff_role = discord.Object(id=staff_role_id, type=discord.Role)
            overwrites[staff_role] = allow

        return overwrites

    def _bot_principal(self, guild: discord.Guild) -> OverwriteTarget:
        if guild.me is not None:
            return guild.me
        return discord.Object(id=self.bot.user.id, type=discord.Member)

    async def provision(
        self, guild: discord.Guild, member: discord.Member, identity: ClientIdentity
    ) -> Workspace:
        """Create the full workspace for one client.

        Raises:
            TransientPlatformError: a Discord call failed or timed out.
            PermissionDenied: the bot lacks Manage Channels / Manage Roles.
        """
        timeout = self.config.platform_timeout
        category_name = self.category_name(identity)
        logger.info(f"Creating channels for: {identity.display_name}")

        category = await platform_call(
            guild.create_category(name=category_name, reason=f"Workspace for {member.id}"),
            f"create category {category_name!r}",
            timeout,
        )
        logger.info(f"Created category: {category_name} ({category.id})")

        overwrites = self.build_overwrites(guild, member)
        await platform_call(
            category.edit(overwrites=overwrites),
            f"set overwrites on {category_name!r}",
            timeout,
        )

        workspace = Workspace(owner_member_id=member.id, category_id=category.id)
        marker = self.config.entry_channel_marker

        for template in self.template:
            channel_name = render_channel_name(template, identity.display_name)
            channel = await platform_call(
                guild.create_text_channel(name=channel_name, category=category),
                f"create channel {channel_name!r}",
                timeout,
            )
            workspace.channel_ids.append(channel.id)
            logger.info(f"Created channel: {channel_name} ({channel.id})")

            if workspace.entry_channel_id is None and marker in channel_name:
                workspace.entry_channel_id = channel.id
                workspace.entry_channel = channel

        if workspace.entry_channel_id is None:
            logger.warning(f"No channel matching {marker!r} in template, welcome message skipped")

        return workspace

