"""
Tests for client address resolution and the 429 response.
"""
import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from attire.core.config import settings
from attire.core.rate_limit import forwarded_client, get_client_ip, rate_limit_exceeded_handler


class TestForwardedClient:

    def test_header_ignored_without_trusted_proxies(self):
        assert forwarded_client("1.2.3.4", "10.0.0.5", []) == "10.0.0.5"

    def test_header_ignored_from_untrusted_peer(self):
        assert forwarded_client("1.2.3.4", "10.0.0.5", ["10.0.0.1"]) == "10.0.0.5"

    def test_trusted_peer_yields_forwarded_client(self):
        assert forwarded_client("1.2.3.4", "10.0.0.1", ["10.0.0.1"]) == "1.2.3.4"

    def test_spoofed_leftmost_hop_is_skipped(self):
        # client sent "6.6.6.6", the proxy appended the real address
        header = "6.6.6.6, 1.2.3.4"
        assert forwarded_client(header, "10.0.0.1", ["10.0.0.1"]) == "1.2.3.4"

    def test_chain_of_trusted_proxies(self):
        header = "1.2.3.4, 10.0.0.2"
        assert forwarded_client(header, "10.0.0.1", ["10.0.0.1", "10.0.0.2"]) == "1.2.3.4"

    def test_missing_header_falls_back_to_peer(self):
        assert forwarded_client(None, "10.0.0.1", ["10.0.0.1"]) == "10.0.0.1"


def build_app() -> FastAPI:
    limiter = Limiter(key_func=get_client_ip, enabled=True)
    app = FastAPI()
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.get("/limited")
    @limiter.limit("2/minute")
    async def limited(request: Request):
        return {"ok": True}

    return app


class TestRateLimitedEndpoint:

    @pytest.mark.anyio
    async def test_third_request_is_429(self):
        transport = ASGITransport(app=build_app())
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            responses = [await client.get("/limited") for _ in range(3)]

        assert [r.status_code for r in responses] == [200, 200, 429]
        body = responses[-1].json()
        assert body["error"] == "RATE_LIMITED"
        assert "limit" in body["details"]
        assert responses[-1].headers["Retry-After"] == "60"

    @pytest.mark.anyio
    async def test_forwarded_header_cannot_reset_the_counter(self, monkeypatch):
        monkeypatch.setattr(settings, "TRUSTED_PROXIES", [])
        transport = ASGITransport(app=build_app())
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            statuses = [
                (await client.get("/limited", headers={"X-Forwarded-For": f"1.1.1.{i}"})).status_code
                for i in range(3)
            ]

        assert statuses == [200, 200, 429]

    @pytest.mark.anyio
    async def test_forwarded_header_honoured_behind_trusted_proxy(self, monkeypatch):
        monkeypatch.setattr(settings, "TRUSTED_PROXIES", ["127.0.0.1"])
        transport = ASGITransport(app=build_app())
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            statuses = [
                (await client.get("/limited", headers={"X-Forwarded-For": f"1.1.1.{i}"})).status_code
                for i in range(3)
            ]

        assert statuses == [200, 200, 200]
