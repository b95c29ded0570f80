"""
HTTP API for the translator.

Routes:
- POST /api/translate - Translate ``{"text": ..., "locale": ...}``
- GET /health - Liveness check with the supported locales

Every response is JSON with status 200; failures are reported in an
``error`` field.
"""

import logging
from typing import Optional

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from .config import Settings
from .models import MISSING_FIELDS, Direction
from .translator import Translator

logger = logging.getLogger("anglo-locale.server")


class TranslateServer:
    """Starlette application wrapping a Translator."""

    def __init__(self, translator: Optional[Translator] = None) -> None:
        self.translator = translator or Translator()
        self.app = self._build_app()

    def _build_app(self) -> Starlette:
        routes = [
            Route("/api/translate", self.post_translate, methods=["POST"]),
            Route("/health", self.get_health, methods=["GET"]),
        ]
        return Starlette(routes=routes)

    async def post_translate(self, request: Request) -> Response:
        """
        Translate the submitted text.

        Args:
            request: Starlette request object

        Returns:
            JSON response with ``text`` and ``translation``, or ``error``
        """
        try:
            body = await request.json()
        except ValueError as e:
            logger.info(f"Rejected request body: {e}")
            return JSONResponse({"error": MISSING_FIELDS})

        if not isinstance(body, dict):
            return JSONResponse({"error": MISSING_FIELDS})

        text = body.get("text")
        locale = body.get("locale")
        if not isinstance(text, str) or not isinstance(locale, str):
            return JSONResponse({"error": MISSING_FIELDS})

        outcome = self.translator.translate(text, locale)
        return JSONResponse(outcome.model_dump())

    async def get_health(self, request: Request) -> Response:
        return JSONResponse({
            "status": "ok",
            "locales": [direction.value for direction in Direction],
        })


def create_app(translator: Optional[Translator] = None) -> Starlette:
    """Build the Starlette app (used by ``uvicorn anglo_locale.server:create_app --factory``)."""
    return TranslateServer(translator).app


def run_server(settings: Settings, translator: Optional[Translator] = None) -> None:
    """
    Serve the HTTP API in the foreground until interrupted.

    Args:
        settings: Host, port and log level to serve with
        translator: Translator to use (defaults to one over the packaged dictionaries)
    """
    server = TranslateServer(translator)
    config = uvicorn.Config(
        server.app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    logger.info(f"🌐 Serving translator on http://{settings.host}:{settings.port}")
    uvicorn.Server(config).run()
