import re

import pytest
from fastapi import FastAPI, Response
from httpx import ASGITransport, AsyncClient

from microcors.adapters.asgi import CORSMiddleware
from microcors.core.config.cors_config import CorsConfig

METHODS = ["POST", "GET", "PUT", "PATCH", "DELETE"]


def _make_app(config: CorsConfig | None = None, calls: list[str] | None = None) -> FastAPI:
    """Create FastAPI test app with a single route answering every method."""
    test_app = FastAPI()
    test_app.add_middleware(CORSMiddleware, config=config)

    @test_app.api_route("/items", methods=[*METHODS, "OPTIONS"])
    async def items() -> dict[str, str]:
        if calls is not None:
            calls.append("items")
        return {"status": "ok"}

    @test_app.get("/varies")
    async def varies() -> Response:
        return Response(content="{}", media_type="application/json", headers={"Vary": "Accept-Encoding"})

    @test_app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("handler failed")

    return test_app


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestCORSMiddleware:
    """Test the ASGI middleware end to end through FastAPI."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", METHODS)
    async def test_no_origin_passes_through(self, method: str) -> None:
        async with _client(_make_app()) as client:
            response = await client.request(method, "/items")

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers
        assert "vary" not in response.headers

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", METHODS)
    async def test_simple_request_headers(self, method: str) -> None:
        async with _client(_make_app()) as client:
            response = await client.request(method, "/items", headers={"Origin": "https://a.example"})

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-credentials"] == "true"
        assert "access-control-allow-methods" not in response.headers
        assert "access-control-allow-headers" not in response.headers
        assert "access-control-max-age" not in response.headers

    @pytest.mark.asyncio
    async def test_preflight_short_circuits(self) -> None:
        calls: list[str] = []
        async with _client(_make_app(calls=calls)) as client:
            response = await client.options("/items", headers={"Origin": "https://a.example"})

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-methods"] == "POST,GET,PUT,PATCH,DELETE,OPTIONS"
        assert response.headers["access-control-max-age"] == "86400"
        assert calls == []

    @pytest.mark.asyncio
    async def test_preflight_runs_handler_when_configured(self) -> None:
        calls: list[str] = []
        app = _make_app(CorsConfig(run_handler_on_preflight_request=True), calls=calls)
        async with _client(app) as client:
            response = await client.options("/items", headers={"Origin": "https://a.example"})

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert response.headers["access-control-allow-headers"].startswith("X-Requested-With,")
        assert calls == ["items"]

    @pytest.mark.asyncio
    async def test_dynamic_origin_appends_to_app_vary(self) -> None:
        app = _make_app(CorsConfig(origin=re.compile(r"\.example$")))
        async with _client(app) as client:
            response = await client.get("/varies", headers={"Origin": "https://a.example"})

        assert response.headers["access-control-allow-origin"] == "https://a.example"
        assert response.headers["vary"] == "Accept-Encoding,Origin"

    @pytest.mark.asyncio
    async def test_rejected_origin_omits_allow_origin(self) -> None:
        app = _make_app(CorsConfig(origin=["https://a.example"]))
        async with _client(app) as client:
            response = await client.get("/items", headers={"Origin": "https://evil.example"})

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers
        assert response.headers["vary"] == "Origin"

    @pytest.mark.asyncio
    async def test_disabled_origin_sends_no_cors_headers(self) -> None:
        app = _make_app(CorsConfig(origin=False, expose_headers=("X-Total",)))
        async with _client(app) as client:
            response = await client.get("/items", headers={"Origin": "https://a.example"})

        assert not [name for name in response.headers if name.startswith("access-control-")]

    @pytest.mark.asyncio
    async def test_expose_headers(self) -> None:
        app = _make_app(CorsConfig(expose_headers=("X-Total", "X-Page")))
        async with _client(app) as client:
            response = await client.get("/items", headers={"Origin": "https://a.example"})

        assert response.headers["access-control-expose-headers"] == "X-Total,X-Page"

    @pytest.mark.asyncio
    async def test_handler_errors_propagate(self) -> None:
        transport = ASGITransport(app=_make_app(), raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            with pytest.raises(RuntimeError, match="handler failed"):
                await client.get("/boom", headers={"Origin": "https://a.example"})

    @pytest.mark.asyncio
    async def test_options_keyword_arguments(self) -> None:
        app = FastAPI()
        app.add_middleware(CORSMiddleware, origin="BAZ", allow_credentials=False)

        @app.get("/")
        async def root() -> dict[str, str]:
            return {}

        async with _client(app) as client:
            response = await client.get("/", headers={"Origin": "https://a.example"})

        assert response.headers["access-control-allow-origin"] == "BAZ"
        assert response.headers["vary"] == "Origin"
        assert "access-control-allow-credentials" not in response.headers
