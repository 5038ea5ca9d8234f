"""Tests for the HTTP lookup API."""

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from chainverify.routers.api import register_api_routes
from chainverify.services.cache import SimpleCache
from conftest import BTC_LEGACY, BTC_TX, ETH_ADDRESS, SOL_ADDRESS


@pytest.fixture
def make_client(make_verifier):
    def _make(handler):
        app = FastAPI()
        app.state.verifier = make_verifier(handler)
        app.state.cache = SimpleCache(ttl_seconds=60)
        register_api_routes(app)
        return TestClient(app), app.state.verifier
    return _make


def test_health(make_client):
    client, _ = make_client(lambda request: httpx.Response(500))
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_chains(make_client):
    client, _ = make_client(lambda request: httpx.Response(500))
    chains = client.get("/api/chains").json()["supportedChains"]
    assert chains[0] == {"id": "bitcoin", "name": "Bitcoin (BTC)"}
    assert len(chains) == 11


def test_validate_address_route(make_client):
    client, verifier = make_client(lambda request: httpx.Response(500))

    body = client.get(f"/api/address/{ETH_ADDRESS}/validate").json()

    assert body == {
        "is_valid": True,
        "network": "ethereum",
        "address": ETH_ADDRESS,
        "sub_format": "ERC-20 Compatible",
        "error": None,
    }
    assert verifier.requests == []


def test_validate_address_route_invalid(make_client):
    client, _ = make_client(lambda request: httpx.Response(500))

    response = client.get("/api/address/garbage/validate")

    assert response.status_code == 200
    assert response.json()["error"] == "Unknown or invalid address format"


def test_verify_address_route_is_cached(make_client):
    client, verifier = make_client(
        lambda request: httpx.Response(200, json={"final_balance": 100000000, "n_tx": 2})
    )

    first = client.get(f"/api/address/{BTC_LEGACY}/verify").json()
    second = client.get(f"/api/address/{BTC_LEGACY}/verify").json()

    assert first == second
    assert first["balance"] == "1.00000000 BTC"
    assert first["explorer_url"] == f"https://blockchain.info/address/{BTC_LEGACY}"
    assert len(verifier.requests) == 1


def test_verify_address_route_does_not_cache_inconclusive(make_client):
    client, verifier = make_client(lambda request: httpx.Response(503))

    for _ in range(2):
        body = client.get(f"/api/address/{BTC_LEGACY}/verify").json()
        assert body["exists"] is True
        assert body["error"] == "API request failed (HTTP 503)"

    assert len(verifier.requests) == 2


def test_verify_address_route_without_adapter(make_client):
    client, verifier = make_client(lambda request: httpx.Response(500))

    body = client.get(f"/api/address/{SOL_ADDRESS}/verify").json()

    assert body["exists"] is True
    assert body["network"] == "solana"
    assert verifier.requests == []


def test_validate_transaction_route_with_network(make_client):
    client, _ = make_client(lambda request: httpx.Response(500))

    body = client.get(f"/api/tx/{BTC_TX}/validate", params={"network": "ethereum"}).json()

    assert body["is_valid"] is False
    assert body["hash"] == BTC_TX
    assert body["error"] == "Invalid ethereum transaction hash format"


def test_verify_transaction_route(make_client):
    client, verifier = make_client(
        lambda request: httpx.Response(200, json={"block_height": 1, "time": 1231006505})
    )

    body = client.get(f"/api/tx/{BTC_TX}/verify").json()
    client.get(f"/api/tx/{BTC_TX}/verify")

    assert body["exists"] is True
    assert body["confirmed"] is True
    assert body["block_number"] == 1
    assert body["explorer_url"] == f"https://blockchain.info/tx/{BTC_TX}"
    assert len(verifier.requests) == 1
