"""Tests for the welcome broadcast."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from cogs.events.member_join.welcome_message import OnboardingMessenger, render_welcome
from core.models.onboarding import ClientIdentity, TeamMember
from tests.helpers import START_HERE_ID, TEAM_IDS, http_error

TEAM_MENTIONS = [f"<@{member_id}>" for member_id in TEAM_IDS.values()]


@pytest.fixture
def identity():
    return ClientIdentity(display_name="Maria", source_invite_code="ABC123")


@pytest.fixture
def channel():
    channel = MagicMock()
    channel.send = AsyncMock()
    return channel


def sent_contents(channel):
    return [call.args[0] for call in channel.send.call_args_list]


class TestRender:
    def test_single_message_contains_every_mention(self, config):
        parts = render_welcome("single", "<@555>", config.team_roster(), config.start_here_ref())

        assert len(parts) == 1
        assert "<@555>" in parts[0]
        for mention in TEAM_MENTIONS:
            assert mention in parts[0]
        assert f"<#{START_HERE_ID}>" in parts[0]

    def test_two_part_message(self, config):
        parts = render_welcome("two_part", "<@555>", config.team_roster(), config.start_here_ref())

        assert len(parts) == 2
        assert "<@555>" in parts[0]
        for mention in TEAM_MENTIONS:
            assert mention in parts[1]
        assert f"<#{START_HERE_ID}>" in parts[1]

    def test_team_part_lists_every_group(self, config):
        team = render_welcome("two_part", "<@555>", config.team_roster(), config.start_here_ref())[1]

        for heading in ("**Founder**", "**Client Success Managers**", "**Creative & Tech Team**"):
            assert heading in team
        assert team.rstrip().endswith("🚀")
        assert team.index("**Creative & Tech Team**") < team.index("**Next step:**")

    def test_unset_roster_uses_fallback_labels(self, make_config):
        config = make_config(
            founder_user_id=None,
            csm1_user_id=None,
            csm2_user_id=None,
            fulfilment_user_id=None,
            operations_user_id=None,
            start_here_channel_id=None,
        )

        (message,) = render_welcome("single", "<@555>", config.team_roster(), config.start_here_ref())

        for label in ("@Founder", "@Client Success", "@Fulfilment", "@Operations", "#start-here"):
            assert label in message


class TestSend:
    @pytest.mark.asyncio
    async def test_sends_single_message(self, config, channel, identity, make_member):
        messenger = OnboardingMessenger(config)

        assert await messenger.send(channel, identity, make_member()) is True

        (content,) = sent_contents(channel)
        assert "<@555>" in content
        mentions = channel.send.call_args.kwargs["allowed_mentions"]
        assert mentions.everyone is False

    @pytest.mark.asyncio
    async def test_parts_sent_in_order(self, make_config, channel, identity, make_member):
        messenger = OnboardingMessenger(make_config(welcome_variant="two_part"))

        await messenger.send(channel, identity, make_member())

        first, second = sent_contents(channel)
        assert first.startswith("✨ **Welcome to Echo Growth!**")
        assert second.startswith("👥 **Meet Your Team**")

    @pytest.mark.asyncio
    async def test_failed_first_part_stops_second(self, make_config, channel, identity, make_member):
        channel.send = AsyncMock(side_effect=http_error(500))
        messenger = OnboardingMessenger(make_config(welcome_variant="two_part"))

        assert await messenger.send(channel, identity, make_member()) is False
        assert channel.send.await_count == 1

    @pytest.mark.asyncio
    async def test_explicit_roster_and_start_here(self, config, channel, identity, make_member):
        roster = [
            TeamMember(key=slot, mention=f"[{slot}]")
            for slot in ("founder", "csm1", "csm2", "fulfilment", "operations")
        ]

        await OnboardingMessenger(config).send(channel, identity, make_member(), roster, "[start]")

        (content,) = sent_contents(channel)
        assert "[founder]" in content and "[operations]" in content
        assert "[start]" in content
