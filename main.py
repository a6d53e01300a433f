#!/usr/bin/env python
"""
Main file for the Echo Growth onboarding bot.
"""

import logging
import sys
from typing import Any, Optional

import discord
from discord.ext import commands

from core.exceptions import ConfigurationError
from core.models.config import BotConfig
from core.repositories import InviteNameRegistry
from utils.config import load_config
from utils.ingress_server import IngressServer

intents = discord.Intents.default()
intents.members = True
intents.invites = True

COGS = ("cogs.events.member_join",)


class EchoGrowthBot(commands.Bot):
    """Bot class."""

    def __init__(self, config: BotConfig, **kwargs: Any) -> None:
        self.test: bool = kwargs.pop("test", False)
        self.config: BotConfig = config

        self.guild: Optional[discord.Guild] = None
        self.invite_names = InviteNameRegistry()
        self.ingress = IngressServer(self, self.invite_names, port=config.port)

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            allowed_mentions=discord.AllowedMentions(everyone=False, users=True, roles=True),
            **kwargs,
        )

    def resolve_guild(self) -> Optional[discord.Guild]:
        """The configured guild, or the first one the bot is in."""
        if self.guild is not None:
            return self.guild

        if self.config.guild_id:
            return self.get_guild(self.config.guild_id)
        return self.guilds[0] if self.guilds else None

    async def load_cogs(self) -> None:
        """Load all cogs"""
        logging.info("Loading cogs...")
        for cog in COGS:
            try:
                await self.load_extension(cog)
                logging.info("Loaded cog: %s", cog)
            except commands.ExtensionAlreadyLoaded:
                logging.warning("Cog %s is already loaded", cog)
            except commands.ExtensionNotFound:
                logging.error("Cog %s not found", cog)
            except commands.NoEntryPointError:
                logging.error("Cog %s has no setup function", cog)
            except commands.ExtensionFailed as error:
                logging.error("Failed to load cog %s: %s", cog, error)

    async def setup_hook(self) -> None:
        """Setup hook."""
        if not self.test:
            await self.ingress.start()
            await self.load_cogs()

    async def on_ready(self) -> None:
        """On ready event"""
        logging.info("Logged in as %s", self.user)

        guild = self.resolve_guild()
        if guild is None:
            logging.error("No guild found (GUILD_ID=%s)", self.config.guild_id)
        else:
            logging.info("Found guild: %s", guild.name)
            self.guild = guild

        logging.info("Ready")

    async def close(self) -> None:
        await self.ingress.stop()
        self.invite_names.clear()
        await super().close()

    def run(self) -> None:
        """Run the bot"""
        super().run(self.config.discord_token, reconnect=True, log_handler=None)


def setup_logging() -> None:
    """Setup logging"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> None:
    setup_logging()

    try:
        config = load_config()
    except ConfigurationError as e:
        logging.critical("%s", e)
        sys.exit(1)

    bot = EchoGrowthBot(config=config)
    bot.run()


if __name__ == "__main__":
    main()
