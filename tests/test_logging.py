"""
로깅 및 앱 구성 테스트
"""
import asyncio
import logging

import httpx
from fastapi.testclient import TestClient

import main
from chainverify.services.cache import SimpleCache
from conftest import BTC_LEGACY


def test_configure_logging_sets_levels():
    """로깅 레벨 설정"""
    applied = main.configure_logging("warning")

    assert applied == logging.WARNING
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("chainverify").level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_unknown_level_falls_back_to_info():
    assert main.configure_logging("chatty") == logging.INFO
    main.configure_logging("DEBUG")


def test_verifier_logs_network_prefix(make_verifier, caplog):
    verifier = make_verifier(lambda request: httpx.Response(503))
    with caplog.at_level(logging.DEBUG, logger="chainverify"):
        asyncio.run(verifier.verify_address(BTC_LEGACY))

    assert any(record.getMessage().startswith("[bitcoin]") for record in caplog.records)
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_app_lifecycle_creates_and_closes_client():
    with TestClient(main.app) as client:
        assert client.get("/health").json()["status"] == "healthy"
        assert main.app.state.verifier.client is main.app.state.http_client
    assert main.app.state.http_client.is_closed


def test_cache_expiry_uses_clock():
    now = [100.0]
    cache = SimpleCache(ttl_seconds=10, clock=lambda: now[0])

    cache.set("k", {"v": 1})
    assert cache.get("k") == {"v": 1}

    now[0] += 11
    assert cache.get("k") is None
    assert "k" not in cache.cache


def test_cache_set_sweeps_expired_entries():
    now = [0.0]
    cache = SimpleCache(ttl_seconds=10, clock=lambda: now[0])

    cache.set("old", {"v": 1})
    now[0] += 5
    cache.set("recent", {"v": 2})
    now[0] += 6
    cache.set("new", {"v": 3})

    assert set(cache.cache) == {"recent", "new"}
    assert cache.get("recent") == {"v": 2}
