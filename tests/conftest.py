# tests/conftest.py
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from types import SimpleNamespace
from typing import Any, Callable
from unittest import mock

import httpx
import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from starlette.requests import Request

from helmet import registry
from helmet.middleware import SecurityHeadersMiddleware

DEFAULT_HEADERS = {
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Download-Options": "noopen",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
}

NON_DEFAULT_HEADERS = [
    "Content-Security-Policy",
    "Expect-CT",
    "Feature-Policy",
    "Public-Key-Pins",
    "Surrogate-Control",
    "Pragma",
    "X-Permitted-Cross-Domain-Policies",
    "Referrer-Policy",
]


# ---------- Fixtures ----------
@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Build a bare Starlette request carrying the given headers."""

    def _make(headers: dict[str, str] | None = None, method: str = "GET") -> Request:
        raw = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]
        return Request({"type": "http", "method": method, "path": "/", "query_string": b"", "headers": raw})

    return _make


@pytest.fixture
def make_response() -> Callable[..., SimpleNamespace]:
    """Response double whose headers keep insertion order."""

    def _make(headers: dict[str, str] | None = None) -> SimpleNamespace:
        return SimpleNamespace(headers=dict(headers or {}))

    return _make


@pytest.fixture
def run_middleware() -> Callable[..., list[tuple[Any, ...]]]:
    """Invoke a middleware and return the argument tuples its continuation saw."""

    def _run(middleware, request, response) -> list[tuple[Any, ...]]:
        calls: list[tuple[Any, ...]] = []
        middleware(request, response, lambda *args: calls.append(args))
        return calls

    return _run


@pytest.fixture
def spied_factories(monkeypatch) -> dict[str, mock.Mock]:
    """Wrap every registry factory in a Mock so composition can be asserted."""
    spies = {feature.name: mock.Mock(wraps=feature.factory) for feature in registry.FEATURES}
    monkeypatch.setattr(
        registry,
        "FEATURES",
        tuple(feature._replace(factory=spies[feature.name]) for feature in registry.FEATURES),
    )
    return spies


@pytest.fixture
def replace_factory(monkeypatch) -> Callable[[str, Callable], None]:
    """Swap the factory of one registry entry, keeping its position and default."""

    def _replace(name: str, factory: Callable) -> None:
        features = tuple(
            feature._replace(factory=factory) if feature.name == name else feature
            for feature in registry.FEATURES
        )
        monkeypatch.setattr(registry, "FEATURES", features)

    return _replace


@pytest.fixture
def make_app() -> Callable[..., FastAPI]:
    def _make(config: dict[str, Any] | None = None) -> FastAPI:
        app = FastAPI()
        app.add_middleware(SecurityHeadersMiddleware, config=config)

        @app.get("/")
        def root():
            return PlainTextResponse("Hello world!", headers={"X-Powered-By": "FastAPI"})

        return app

    return _make


@pytest.fixture
def make_client(make_app) -> Callable[..., httpx.AsyncClient]:
    """Provide AsyncClients bound to a fresh app built from ``config``."""

    def _make(config: dict[str, Any] | None = None, app: FastAPI | None = None) -> httpx.AsyncClient:
        target = app if app is not None else make_app(config)
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=target), base_url="http://test")

    return _make
