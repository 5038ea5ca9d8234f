import logging
from typing import Optional

from .chain_configs import TX_HASH_PATTERNS, NetworkId, find_network
from .models import TransactionValidationResult

logger = logging.getLogger(__name__)


def detect_transaction_network(tx_hash: str, hint_network=None) -> Optional[NetworkId]:
    """트랜잭션 해시 형식으로 네트워크 감지. 힌트가 있으면 해당 네트워크 패턴만 확인한다"""
    trimmed_hash = (tx_hash or "").strip()

    if hint_network:
        hint = find_network(hint_network)
        for rule in TX_HASH_PATTERNS:
            if rule.network == hint:
                return hint if rule.matcher(trimmed_hash) else None
        return None

    for rule in TX_HASH_PATTERNS:
        if rule.matcher(trimmed_hash):
            return rule.network
    return None


def validate_transaction_hash(tx_hash: str, network=None) -> TransactionValidationResult:
    """트랜잭션 해시 형식 검증 (네트워크 호출 없음, 예외를 던지지 않음)"""
    trimmed_hash = (tx_hash or "").strip()

    if not trimmed_hash:
        return TransactionValidationResult(
            is_valid=False,
            tx_hash=trimmed_hash,
            error="Transaction hash is empty",
        )

    if network:
        requested = network.value if isinstance(network, NetworkId) else str(network).strip().lower()
        hint = find_network(requested)
        if hint is None or not any(rule.network == hint for rule in TX_HASH_PATTERNS):
            return TransactionValidationResult(
                is_valid=False,
                network=requested,
                tx_hash=trimmed_hash,
                error=f"Unknown blockchain: {requested}",
            )

        # 힌트가 있으면 전체 패턴으로 재감지하지 않는다
        if detect_transaction_network(trimmed_hash, hint) is None:
            logger.debug(f"[{requested}] 트랜잭션 해시 형식 불일치: {trimmed_hash[:20]}...")
            return TransactionValidationResult(
                is_valid=False,
                network=requested,
                tx_hash=trimmed_hash,
                error=f"Invalid {requested} transaction hash format",
            )

        return TransactionValidationResult(is_valid=True, network=requested, tx_hash=trimmed_hash)

    detected = detect_transaction_network(trimmed_hash)
    if detected is None:
        return TransactionValidationResult(
            is_valid=False,
            tx_hash=trimmed_hash,
            error="Unknown transaction hash format",
        )

    return TransactionValidationResult(is_valid=True, network=detected.value, tx_hash=trimmed_hash)
