"""Tests for the outbound call wrapper."""

import asyncio

import aiohttp
import discord
import pytest

from core.exceptions import PermissionDenied, TransientFetchError, TransientPlatformError
from tests.helpers import http_error
from utils.platform import platform_call


async def returns(value):
    return value


async def raises(error):
    raise error


@pytest.mark.asyncio
async def test_passes_result_through():
    assert await platform_call(returns(42), "answer") == 42


@pytest.mark.asyncio
async def test_timeout_is_transient():
    with pytest.raises(TransientPlatformError) as excinfo:
        await platform_call(asyncio.sleep(1), "slow call", timeout=0.01)
    assert excinfo.value.action == "slow call"


@pytest.mark.asyncio
async def test_forbidden_is_permission_denied():
    with pytest.raises(PermissionDenied):
        await platform_call(raises(http_error(403, discord.Forbidden)), "create category")


@pytest.mark.asyncio
async def test_http_error_is_transient():
    with pytest.raises(TransientPlatformError) as excinfo:
        await platform_call(raises(http_error(429)), "create channel")
    assert not isinstance(excinfo.value, PermissionDenied)


@pytest.mark.asyncio
async def test_network_error_uses_given_class():
    with pytest.raises(TransientFetchError):
        await platform_call(
            raises(aiohttp.ClientConnectionError("reset")), "list invites", error_cls=TransientFetchError
        )
