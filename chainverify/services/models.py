"""
주소/트랜잭션 검증 결과 타입 정의
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .chain_configs import NetworkId


class InconclusiveVerificationPolicy(str, Enum):
    """원격 검증이 결론을 내지 못했을 때(네트워크 오류, 타임아웃, 응답 이상) 적용할 정책"""
    # 기본값: 형식이 올바른 주소는 외부 API 장애만으로 거부하지 않는다 (출금 요청 흐름 보호)
    ASSUME_VALID = "assume-valid"
    ASSUME_MISSING = "assume-missing"


class AddressValidationResult(BaseModel):
    """주소 형식 검증 결과 (네트워크 호출 없음)"""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    network: Optional[NetworkId] = None
    address: str = ""
    sub_format: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _valid_requires_network(self):
        if self.is_valid and self.network is None:
            raise ValueError("valid address result requires a network")
        return self


class AddressVerificationResult(AddressValidationResult):
    """원격 검증까지 포함한 주소 결과. error는 검증 불확정(soft failure)을 뜻한다"""
    exists: bool = False
    balance: Optional[str] = None
    transaction_count: Optional[int] = None
    explorer_url: Optional[str] = None


class TransactionValidationResult(BaseModel):
    """트랜잭션 해시 형식 검증 결과"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_valid: bool
    # 힌트로 받은 네트워크가 지원 목록에 없을 때도 그대로 돌려주기 위해 문자열을 허용
    network: Optional[str] = None
    tx_hash: str = Field(default="", alias="hash")
    error: Optional[str] = None

    @model_validator(mode="after")
    def _valid_requires_network(self):
        if self.is_valid and self.network is None:
            raise ValueError("valid transaction result requires a network")
        return self


class TransactionVerificationResult(TransactionValidationResult):
    exists: bool = False
    confirmed: bool = False
    block_number: Optional[int] = None
    timestamp: Optional[str] = None
    explorer_url: Optional[str] = None
