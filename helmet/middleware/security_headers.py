from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from helmet.composer import helmet
from helmet.core.config import load_settings
from helmet.core.exceptions import HelmetError
from helmet.core.logging import get_logger


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Run a composed helmet chain against every HTTP response.

    ``config`` defaults to the mapping built from ``HELMET_*`` settings, read
    when the middleware is built; invalid settings raise ``HelmetConfigError``.
    """

    def __init__(self, app: ASGIApp, config: Mapping[str, Any] | None = None) -> None:
        super().__init__(app)
        if config is None:
            config = load_settings().helmet_config()
        self.helmet = helmet(config)
        self.logger = get_logger("helmet.requests")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        outcome: asyncio.Future[None] = asyncio.get_running_loop().create_future()

        def done(error: Any = None) -> None:
            if error is not None:
                if not isinstance(error, BaseException):
                    error = HelmetError(str(error))
                outcome.set_exception(error)
            else:
                outcome.set_result(None)

        try:
            self.helmet(request, response, done)
            await outcome
        except Exception as exc:
            self.logger.warning(
                "Security header chain failed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "error": repr(exc),
                },
            )
            raise
        return response
