import asyncio
import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

import certifi
import httpx

from ..configuration import ServiceConfiguration, config
from .address_service import get_explorer_url, get_transaction_explorer_url, validate_address
from .chain_configs import find_network, get_address_adapters, get_transaction_adapters
from .models import (
    AddressVerificationResult,
    InconclusiveVerificationPolicy,
    TransactionVerificationResult,
)
from .transaction_service import validate_transaction_hash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifierSettings:
    """원격 검증기 설정. 모듈 전역 상태 대신 생성 시점에 명시적으로 주입한다"""
    timeout: float = 10.0
    headers: Mapping[str, str] = field(default_factory=lambda: {"User-Agent": "Mozilla/5.0"})
    etherscan_api_key: Optional[str] = None

    @classmethod
    def from_config(cls, configuration: ServiceConfiguration = config) -> "VerifierSettings":
        return cls(
            timeout=configuration.VERIFY_TIMEOUT_SECONDS,
            headers={"User-Agent": configuration.VERIFY_USER_AGENT},
            etherscan_api_key=configuration.ETHERSCAN_API_KEY,
        )


class BlockchainVerifier:
    """
    네트워크별 공개 API로 주소/트랜잭션 존재 여부를 확인한다.

    호출 1회당 요청은 정확히 1번이며 재시도하지 않는다. 원격 검증이 실패하면
    (네트워크 오류, 타임아웃, 예상치 못한 응답) 예외를 던지지 않고 policy에 따라
    결과를 만든 뒤 error 필드에 원인을 남긴다.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Optional[VerifierSettings] = None,
        policy: InconclusiveVerificationPolicy = InconclusiveVerificationPolicy.ASSUME_VALID,
    ):
        self.client = client
        self.settings = settings or VerifierSettings.from_config()
        self.policy = policy
        self.address_adapters = get_address_adapters()
        self.transaction_adapters = get_transaction_adapters()

    def _inconclusive_exists(self) -> bool:
        return self.policy == InconclusiveVerificationPolicy.ASSUME_VALID

    async def verify_address(self, address: str) -> AddressVerificationResult:
        validation = validate_address(address)

        if not validation.is_valid:
            return AddressVerificationResult(**{**validation.model_dump(), "exists": False})

        network = validation.network
        base = {**validation.model_dump(), "explorer_url": get_explorer_url(network, validation.address)}
        cfg = self.address_adapters.get(network)

        # 검증 API가 없는 네트워크는 형식 검증만으로 존재하는 것으로 본다
        if cfg is None:
            logger.debug(f"[{network.value}] 검증 어댑터 없음, 형식 검증 결과만 반환")
            return AddressVerificationResult(**{**base, "exists": True})

        outcome = await self._fetch_and_normalize(network.value, cfg, validation.address)
        if "error" in outcome:
            return AddressVerificationResult(**{
                **base,
                "exists": self._inconclusive_exists(),
                "error": outcome["error"],
            })

        return AddressVerificationResult(**{
            **base,
            "exists": outcome.get("exists", True),
            "balance": outcome.get("balance"),
            "transaction_count": outcome.get("transaction_count"),
        })

    async def verify_transaction(self, tx_hash: str, network=None) -> TransactionVerificationResult:
        validation = validate_transaction_hash(tx_hash, network)

        if not validation.is_valid:
            return TransactionVerificationResult(**{
                **validation.model_dump(),
                "exists": False,
                "confirmed": False,
            })

        chain = find_network(validation.network)
        base = {
            **validation.model_dump(),
            "explorer_url": get_transaction_explorer_url(chain, validation.tx_hash) or None,
        }
        cfg = self.transaction_adapters.get(chain)

        if cfg is None:
            logger.debug(f"[{chain.value}] 트랜잭션 검증 어댑터 없음, 확인된 것으로 처리")
            return TransactionVerificationResult(**{**base, "exists": True, "confirmed": True})

        outcome = await self._fetch_and_normalize(chain.value, cfg, validation.tx_hash)
        if "error" in outcome:
            return TransactionVerificationResult(**{
                **base,
                "exists": self._inconclusive_exists(),
                "confirmed": False,
                "error": outcome["error"],
            })

        return TransactionVerificationResult(**{
            **base,
            "exists": outcome.get("exists", False),
            "confirmed": outcome.get("confirmed", False),
            "block_number": outcome.get("block_number"),
            "timestamp": outcome.get("timestamp"),
        })

    async def verify_addresses(self, addresses) -> list:
        """여러 주소를 동시에 검증. 입력 순서대로 결과를 반환한다"""
        return list(await asyncio.gather(*(self.verify_address(a) for a in addresses)))

    async def _fetch_and_normalize(self, key: str, cfg: dict, value: str) -> dict:
        """
        어댑터 설정으로 1회 요청 후 응답을 정규화한다.

        반환값:
            - 정규화된 dict (exists, balance 등)
            - 404로 부재가 확인되면 {"exists": False}
            - 검증 불확정이면 {"error": "..."}
        """
        api_url = cfg["api"](value)
        params = {}
        if cfg.get("api_key_param") and self.settings.etherscan_api_key:
            params[cfg["api_key_param"]] = self.settings.etherscan_api_key

        try:
            res = await asyncio.wait_for(
                self.client.get(api_url, params=params or None, headers=dict(self.settings.headers),
                                timeout=self.settings.timeout),
                timeout=self.settings.timeout,
            )
            logger.debug(f"[{key}] 응답 상태코드: {res.status_code}")

            if res.status_code == 404 and cfg.get("not_found_on_404"):
                logger.debug(f"[{key}] HTTP 404 (찾을 수 없음): {value}")
                return {"exists": False, "confirmed": False}

            res.raise_for_status()

            try:
                json_data = res.json()
            except ValueError as e:
                logger.warning(f"[{key}] JSON 파싱 실패 → {e}. 응답 본문: {res.text[:200]}")
                return {"error": "Invalid JSON response from verification API"}

            try:
                normalized_data = cfg["normalize"](json_data)
            except (KeyError, TypeError, ValueError, AttributeError, ArithmeticError) as e:
                logger.warning(f"[{key}] 응답 구조가 예상과 다름 → {e!r}. 응답: {str(json_data)[:200]}")
                return {"error": "Unexpected response format from verification API"}

            logger.debug(f"[{key}] 정규화 성공.")
            return normalized_data

        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(f"[{key}] 요청 시간 초과 ({self.settings.timeout}s). API: {api_url}")
            return {"error": f"Verification timed out after {self.settings.timeout:g}s"}
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"[{key}] HTTP 오류 (상태코드: {status_code}) → {e}. API: {api_url}")
            return {"error": f"API request failed (HTTP {status_code})"}
        except httpx.RequestError as e:
            logger.warning(f"[{key}] 요청 오류 → {e!r}. API: {api_url}")
            return {"error": f"API request failed: {e.__class__.__name__}"}
        except Exception as e:
            logger.error(f"[{key}] 알 수 없는 오류 발생 → {e}. API: {api_url}", exc_info=True)
            return {"error": f"Verification failed: {e}"}


async def verify_address(address: str, client: Optional[httpx.AsyncClient] = None,
                         settings: Optional[VerifierSettings] = None) -> AddressVerificationResult:
    """단발성 주소 검증. client가 없으면 호출 동안만 사용할 클라이언트를 만든다"""
    if client is not None:
        return await BlockchainVerifier(client, settings).verify_address(address)
    async with httpx.AsyncClient(verify=certifi.where()) as own_client:
        return await BlockchainVerifier(own_client, settings).verify_address(address)


async def verify_transaction(tx_hash: str, network=None, client: Optional[httpx.AsyncClient] = None,
                             settings: Optional[VerifierSettings] = None) -> TransactionVerificationResult:
    if client is not None:
        return await BlockchainVerifier(client, settings).verify_transaction(tx_hash, network)
    async with httpx.AsyncClient(verify=certifi.where()) as own_client:
        return await BlockchainVerifier(own_client, settings).verify_transaction(tx_hash, network)
