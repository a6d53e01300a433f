"""Pytest fixtures for the onboarding pipeline."""

import itertools
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.models.config import BotConfig
from core.repositories import InviteNameRegistry
from tests.helpers import START_HERE_ID, TEAM_IDS

ENV_KEYS = (
    "DISCORD_TOKEN",
    "GUILD_ID",
    "STAFF_ROLE_ID",
    "FOUNDER_USER_ID",
    "CSM1_USER_ID",
    "CSM2_USER_ID",
    "FULFILMENT_USER_ID",
    "OPERATIONS_USER_ID",
    "START_HERE_CHANNEL_ID",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables leaking from the host environment."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def make_config(clean_env):
    def _make(**overrides) -> BotConfig:
        values = {"discord_token": "test-token", **TEAM_IDS, "start_here_channel_id": START_HERE_ID}
        values.update(overrides)
        return BotConfig(**values)

    return _make


@pytest.fixture
def config(make_config) -> BotConfig:
    return make_config()


@pytest.fixture
def make_guild():
    """Factory for guild doubles that record created channels."""

    def _make(guild_id: int = 1, invites=None) -> MagicMock:
        ids = itertools.count(10_000)
        guild = MagicMock()
        guild.id = guild_id
        guild.name = "Echo Growth"
        guild.invites = AsyncMock(return_value=list(invites or []))
        guild.default_role = MagicMock(name="everyone")
        guild.me = MagicMock(name="bot_member")
        guild.get_role.return_value = None
        guild.created_channels = []

        category = MagicMock(name="category")
        category.id = next(ids)
        category.edit = AsyncMock()
        guild.create_category = AsyncMock(return_value=category)
        guild.category = category

        async def create_text_channel(name, category=None, **kwargs):
            channel = MagicMock(name="text_channel")
            channel.id = next(ids)
            channel.name = name
            channel.category = category
            channel.send = AsyncMock()
            guild.created_channels.append(channel)
            return channel

        guild.create_text_channel = AsyncMock(side_effect=create_text_channel)
        return guild

    return _make


@pytest.fixture
def make_member():
    def _make(member_id: int = 555, nick=None, global_name=None, username="client_user", guild=None) -> MagicMock:
        member = MagicMock()
        member.id = member_id
        member.nick = nick
        member.global_name = global_name
        member.name = username
        member.mention = f"<@{member_id}>"
        member.guild = guild
        return member

    return _make


@pytest.fixture
def bot(config) -> MagicMock:
    """Fixture for the Bot"""
    bot_mock = MagicMock()
    bot_mock.config = config
    bot_mock.invite_names = InviteNameRegistry()
    bot_mock.user.id = 999
    bot_mock.is_ready.return_value = True
    return bot_mock

