"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# 프로젝트 루트를 PYTHONPATH에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import httpx
import pytest

from chainverify.services.verification_service import BlockchainVerifier, VerifierSettings


BTC_LEGACY = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
BTC_P2SH = "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy"
BTC_BECH32 = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"
BTC_TAPROOT = "bc1p5d7rjq7g6rdk2yhzks9smlaqtedr4dekq08ge8ztwac72sfr9rusxg3297"
ETH_ADDRESS = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
LTC_ADDRESS = "LaMT348PWRnrqeeWArpwQPbuanpXDZGEUz"
BCH_ADDRESS = "bitcoincash:qpm2qsznhks23z7629mms6s4cwef74vcwvy22gdx6a"
DOGE_ADDRESS = "DH5yaieqoZN36fDVciNyRueRGvGLR3mr7L"
XRP_ADDRESS = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"
SOL_ADDRESS = "So11111111111111111111111111111111111111112"
ADA_ADDRESS = "addr1" + "q" * 98
DOT_ADDRESS = "15oF4uVJwmo4TdGW7VfQxNLavjCXviqxT9S1MgbjMNHr6Sp5"
TRX_BASE58_ADDRESS = "TLa2f6VPqDgRE67v1736s7bJ8Ray5wYjU7"
TRX_NON_BASE58_ADDRESS = "T" + "0" * 33
ATOM_ADDRESS = "cosmos1hsk6jryyqjfhp5dhc55tc9jtckygx0eph6dd02"

BTC_TX = "a1075db55d416d3ca199f55b6084e2115b9345e16c5cf302fc80e9d5fbf5d48d"
ETH_TX = "0x" + "ab" * 32
SOL_TX = "5" * 88


@pytest.fixture
def fast_settings():
    """타임아웃이 짧은 검증기 설정"""
    return VerifierSettings(timeout=0.2, headers={"User-Agent": "pytest"})


@pytest.fixture
def make_verifier(fast_settings):
    """
    httpx.MockTransport 핸들러로 검증기를 만든다.
    생성된 클라이언트의 요청 URL은 verifier.requests 에 기록된다.
    """
    def _make(handler, **kwargs):
        requests = []

        def _recording_handler(request):
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_recording_handler))
        verifier = BlockchainVerifier(client, kwargs.pop("settings", fast_settings), **kwargs)
        verifier.requests = requests
        return verifier

    return _make
