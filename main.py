import uvicorn
import logging
import sys

import certifi
import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chainverify.configuration import config
from chainverify.routers.api import register_api_routes
from chainverify.services.cache import SimpleCache
from chainverify.services.verification_service import BlockchainVerifier, VerifierSettings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


# --- 로깅 설정 ---
def configure_logging(log_level_str: str = config.LOG_LEVEL) -> int:
    """루트 로거를 stdout으로 설정하고 httpx/uvicorn 로거 레벨을 맞춘다. 적용된 레벨을 반환"""
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )

    # 외부 API 요청 로그는 WARNING 이상만
    httpx_logger = logging.getLogger("httpx")
    httpx_logger.setLevel(logging.WARNING)
    httpx_logger.propagate = True

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "chainverify", "main"]:
        logger_instance = logging.getLogger(logger_name)
        logger_instance.setLevel(log_level)
        logger_instance.propagate = True
        logger_instance.handlers.clear()

    return log_level


configure_logging()
logger = logging.getLogger(__name__)

# --- FastAPI 앱 초기화 ---
app = FastAPI(title="Address & Transaction Verification", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.cache = SimpleCache(ttl_seconds=config.CACHE_TTL_SECONDS)


# --- Startup Event ---
@app.on_event("startup")
async def startup_event():
    """공용 HTTP 클라이언트와 검증기 생성"""
    settings = VerifierSettings.from_config()
    app.state.http_client = httpx.AsyncClient(verify=certifi.where(), headers=dict(settings.headers))
    app.state.verifier = BlockchainVerifier(app.state.http_client, settings)
    logger.info("="*60)
    logger.info(f"애플리케이션 시작 - 검증 타임아웃: {settings.timeout}s, 캐시 TTL: {config.CACHE_TTL_SECONDS}s")
    logger.info("="*60)


@app.on_event("shutdown")
async def shutdown_event():
    """HTTP 클라이언트 종료"""
    logger.info("애플리케이션 종료 중...")
    await app.state.http_client.aclose()
    logger.info("HTTP 클라이언트 종료 완료")


# --- 라우터 등록 ---
register_api_routes(app)


if __name__ == "__main__":
    uvicorn_log_config = {
        "version": 1, "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": LOG_DATEFMT},
            "access": {"format": LOG_FORMAT, "datefmt": LOG_DATEFMT},
        },
        "handlers": {
            "default": {"formatter": "default", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
            "access": {"formatter": "access", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": config.LOG_LEVEL, "propagate": False},
            "uvicorn.error": {"handlers": ["default"], "level": config.LOG_LEVEL, "propagate": False},
            "uvicorn.access": {"handlers": ["access"], "level": config.LOG_LEVEL, "propagate": False},
        },
        "root": {"level": config.LOG_LEVEL, "handlers": ["default"]},
    }

    logger.info(f"서버 시작 (호스트: {config.HOST}, 포트: {config.PORT})")
    uvicorn.run("main:app", host=config.HOST, port=config.PORT, log_config=uvicorn_log_config,
                use_colors=False, access_log=True, reload=config.DEBUG_MODE)
