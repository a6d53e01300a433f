"""Shared builders for test doubles."""

from unittest.mock import MagicMock

import discord

from core.models.onboarding import InviteRecord

TEAM_IDS = {
    "founder_user_id": 1361785718900396315,
    "csm1_user_id": 1018939468763373589,
    "csm2_user_id": 1322178805359706213,
    "fulfilment_user_id": 1394372856128733305,
    "operations_user_id": 775132202022600724,
}

START_HERE_ID = 1431246046041997344


def make_invite(code: str, uses: int) -> MagicMock:
    invite = MagicMock()
    invite.code = code
    invite.uses = uses
    return invite


def records(**uses) -> list[InviteRecord]:
    return [InviteRecord(code=code, uses=count) for code, count in uses.items()]


def http_error(status: int = 500, cls=discord.HTTPException):
    response = MagicMock()
    response.status = status
    response.reason = "error"
    return cls(response, "boom")
