"""HTTP ingress for invite name mappings and liveness probes."""

import json
import logging
from typing import Any, Optional

from aiohttp import web
from pydantic import ValidationError

from core.exceptions import MalformedIngressPayload
from core.models.ingress import InviteMapPayload
from core.repositories import InviteNameRegistry

logger = logging.getLogger(__name__)

LIVENESS_TEXT = "Echo Growth Discord Bot is running."
MISSING_FIELDS_TEXT = "inviteCode and firstname required"


def parse_invite_map(body: Any) -> InviteMapPayload:
    """Validate an ingress body.

    Raises:
        MalformedIngressPayload: the body is not an object with both fields.
    """
    if not isinstance(body, dict):
        raise MalformedIngressPayload(MISSING_FIELDS_TEXT, value=type(body).__name__)
    try:
        return InviteMapPayload.model_validate(body)
    except ValidationError as e:
        field = ".".join(str(part) for part in e.errors()[0]["loc"])
        raise MalformedIngressPayload(MISSING_FIELDS_TEXT, field=field) from e


class IngressServer:
    """Small aiohttp server fed by the form automation."""

    def __init__(self, bot, registry: InviteNameRegistry, port: int = 3000, host: str = "0.0.0.0"):
        """Initialize ingress server."""
        self.bot = bot
        self.registry = registry
        self.port = port
        self.host = host
        self.app = web.Application()
        self.runner: Optional[web.AppRunner] = None
        self._setup_routes()

    def _setup_routes(self):
        """Setup ingress and probe routes."""
        self.app.router.add_get("/", self.index)
        self.app.router.add_post("/invite-map", self.invite_map)
        self.app.router.add_get("/health", self.health_check)
        self.app.router.add_get("/ready", self.readiness_check)

    async def index(self, request):
        return web.Response(text=LIVENESS_TEXT, status=200)

    async def invite_map(self, request):
        """Store the name submitted for an invite code."""
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = None

        try:
            payload = parse_invite_map(body)
        except MalformedIngressPayload as e:
            logger.warning(f"Rejected invite mapping: {e.details or e}")
            return web.Response(text=MISSING_FIELDS_TEXT, status=400)

        self.registry.put(payload.invite_code, payload.firstname)
        return web.Response(text="ok", status=200)

    async def health_check(self, request):
        """Liveness probe - checks if bot process is alive."""
        return web.Response(text="OK", status=200)

    async def readiness_check(self, request):
        """Readiness probe - checks if bot is connected and has a guild."""
        if not self.bot.is_ready():
            return web.Response(text="Bot not ready", status=503)

        if self.bot.resolve_guild() is None:
            return web.Response(text="No guild connected", status=503)

        return web.Response(text="Ready", status=200)

    async def start(self):
        """Start the ingress server."""
        try:
            self.runner = web.AppRunner(self.app)
            await self.runner.setup()
            site = web.TCPSite(self.runner, self.host, self.port)
            await site.start()
            logger.info(f"HTTP server listening on port {self.port}")
        except Exception as e:
            logger.error(f"Failed to start HTTP server: {e}")
            raise

    async def stop(self):
        """Stop the ingress server."""
        if self.runner:
            await self.runner.cleanup()
            self.runner = None
            logger.info("HTTP server stopped")
