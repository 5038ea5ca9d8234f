import logging
from typing import Optional

from .chain_configs import (
    ADDRESS_EXPLORERS,
    ADDRESS_PATTERNS,
    DEFAULT_SUB_FORMAT,
    DISPLAY_NAMES,
    SUB_FORMAT_RULES,
    TRANSACTION_EXPLORERS,
    NetworkId,
    find_network,
)
from .models import AddressValidationResult

logger = logging.getLogger(__name__)


def detect_blockchain(address: str) -> Optional[NetworkId]:
    """주소 문자열의 형식으로 블록체인을 감지 (레지스트리 순서상 첫 번째 일치)"""
    trimmed_address = (address or "").strip()
    for rule in ADDRESS_PATTERNS:
        if rule.matcher(trimmed_address):
            return rule.network
    return None


def detect_sub_format(network: NetworkId, address: str) -> str:
    for prefix, label in SUB_FORMAT_RULES.get(network, ()):
        if address.startswith(prefix):
            return label
    return DEFAULT_SUB_FORMAT


def validate_address(address: str) -> AddressValidationResult:
    """주소 형식만 검증 (네트워크 호출 없음, 예외를 던지지 않음)"""
    trimmed_address = (address or "").strip()

    if not trimmed_address:
        return AddressValidationResult(
            is_valid=False,
            address=trimmed_address,
            error="Address is empty",
        )

    network = detect_blockchain(trimmed_address)
    if network is None:
        logger.debug(f"주소 형식을 인식하지 못함: {trimmed_address[:64]}")
        return AddressValidationResult(
            is_valid=False,
            address=trimmed_address,
            error="Unknown or invalid address format",
        )

    return AddressValidationResult(
        is_valid=True,
        network=network,
        address=trimmed_address,
        sub_format=detect_sub_format(network, trimmed_address),
    )


def get_explorer_url(network, address: str) -> str:
    """블록 익스플로러 주소 페이지 URL. 알 수 없는 네트워크면 빈 문자열"""
    template = ADDRESS_EXPLORERS.get(find_network(network))
    if not template:
        return ""
    return template.format(address=address)


def get_transaction_explorer_url(network, tx_hash: str) -> str:
    template = TRANSACTION_EXPLORERS.get(find_network(network))
    if not template:
        return ""
    return template.format(hash=tx_hash)


def format_blockchain_name(network) -> str:
    """표시용 블록체인 이름 (예: 'Bitcoin (BTC)')"""
    known = find_network(network)
    if known is not None:
        return DISPLAY_NAMES[known]
    name = network.value if isinstance(network, NetworkId) else str(network or "")
    return name[:1].upper() + name[1:]


def get_supported_blockchains() -> list:
    """UI 표시용 지원 블록체인 목록 (레지스트리 순서)"""
    return [
        {"id": rule.network.value, "name": format_blockchain_name(rule.network)}
        for rule in ADDRESS_PATTERNS
    ]
