"""
API 라우터 (주소/트랜잭션 검증, 체인 목록)
"""
import logging
import time
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from chainverify.services.address_service import get_supported_blockchains, validate_address
from chainverify.services.transaction_service import validate_transaction_hash

logger = logging.getLogger(__name__)


def _to_json(result) -> dict:
    return result.model_dump(mode="json", by_alias=True)


def register_api_routes(app):
    """
    API 라우트를 FastAPI 앱에 등록.

    app.state.verifier (BlockchainVerifier)와 app.state.cache (SimpleCache)가 준비되어 있어야 한다.
    검증 실패도 응답 본문으로 전달하므로 항상 200을 반환한다.
    """

    @app.get("/health")
    async def health_check():
        """헬스 체크 엔드포인트"""
        return {"status": "healthy", "timestamp": time.time()}

    @app.get("/api/chains")
    async def get_chains():
        """지원하는 체인 목록 조회 API"""
        return JSONResponse(content={"supportedChains": get_supported_blockchains()})

    @app.get("/api/address/{address}/validate")
    async def validate_address_route(address: str):
        """주소 형식 검증 API (네트워크 호출 없음)"""
        return JSONResponse(content=_to_json(validate_address(address)))

    @app.get("/api/address/{address}/verify")
    async def verify_address_route(address: str, request: Request):
        """주소 존재 확인 API"""
        cache = request.app.state.cache
        cache_key = f"address:{address.strip()}"
        cached_result = cache.get(cache_key)
        if cached_result:
            return JSONResponse(content=cached_result)

        result = await request.app.state.verifier.verify_address(address)
        content = _to_json(result)
        # 검증 불확정 결과는 캐시하지 않는다
        if result.is_valid and not result.error:
            cache.set(cache_key, content)
        return JSONResponse(content=content)

    @app.get("/api/tx/{tx_hash}/validate")
    async def validate_transaction_route(tx_hash: str, network: Optional[str] = None):
        """트랜잭션 해시 형식 검증 API"""
        return JSONResponse(content=_to_json(validate_transaction_hash(tx_hash, network)))

    @app.get("/api/tx/{tx_hash}/verify")
    async def verify_transaction_route(tx_hash: str, request: Request, network: Optional[str] = None):
        """트랜잭션 조회 API"""
        cache = request.app.state.cache
        cache_key = f"tx:{network or ''}:{tx_hash.strip()}"
        cached_result = cache.get(cache_key)
        if cached_result:
            return JSONResponse(content=cached_result)

        result = await request.app.state.verifier.verify_transaction(tx_hash, network)
        content = _to_json(result)
        if result.is_valid and not result.error:
            cache.set(cache_key, content)
        else:
            logger.debug(f"트랜잭션 검증 결과 캐시 생략: {tx_hash[:20]}... ({result.error})")
        return JSONResponse(content=content)
