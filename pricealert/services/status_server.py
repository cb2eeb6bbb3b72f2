"""
Minimal HTTP status endpoint so the process can be probed while it runs.
"""

import logging
import time
from typing import Optional

from aiohttp import web

logger = logging.getLogger(__name__)


class StatusServer:
    """
    Serves ``GET /`` (plain-text liveness) and ``GET /health`` (JSON).

    Args:
        asset_id (str): Asset being watched, reported by /health.
        interval_minutes (int): Schedule interval, reported by /health.
        host (str): Interface to bind.
        port (int): Port to listen on.
    """
    def __init__(self, asset_id: str, interval_minutes: int, host: str = "0.0.0.0", port: int = 4000):
        self.asset_id = asset_id
        self.interval_minutes = interval_minutes
        self.host = host
        self.port = port
        self.started_at = time.monotonic()
        self._runner: Optional[web.AppRunner] = None

    def create_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/", self.handle_index)
        app.router.add_get("/health", self.handle_health)
        return app

    async def handle_index(self, request: web.Request) -> web.Response:
        return web.Response(text=f"Price alert bot is running ({self.asset_id}).")

    async def handle_health(self, request: web.Request) -> web.Response:
        return web.json_response({
            "status": "ok",
            "asset": self.asset_id,
            "check_interval_minutes": self.interval_minutes,
            "uptime_seconds": round(time.monotonic() - self.started_at, 1),
        })

    async def start(self):
        self._runner = web.AppRunner(self.create_app())
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()
        logger.info(f"Server running on port {self.port}")

    async def stop(self):
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
            logger.info("Status server stopped.")
