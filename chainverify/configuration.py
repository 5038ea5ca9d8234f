"""
서비스 설정 관리 (.env + 환경 변수)
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class ServiceConfiguration:
    """서비스 설정 클래스"""

    # ========== 환경 설정 ==========
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production").lower()
    DEBUG_MODE: bool = ENVIRONMENT == "development"

    # 개발 환경이면 DEBUG, 아니면 INFO
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG_MODE else "INFO").upper()

    # ========== 원격 검증 설정 ==========
    # 호출 1회당 전체 제한 시간 (초)
    VERIFY_TIMEOUT_SECONDS: float = float(os.getenv("VERIFY_TIMEOUT_SECONDS", "10"))
    VERIFY_USER_AGENT: str = os.getenv("VERIFY_USER_AGENT", "Mozilla/5.0")

    # Etherscan API 키 (없어도 기본 조회는 동작)
    ETHERSCAN_API_KEY: Optional[str] = os.getenv("ETHERSCAN_API_KEY")

    # ========== HTTP API 설정 ==========
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "300"))
    HOST: str = os.getenv("HOST", "127.0.0.1" if DEBUG_MODE else "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))


# 전역 설정 인스턴스
config = ServiceConfiguration()
