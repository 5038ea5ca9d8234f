"""
주소/트랜잭션 분류 및 검증 엔진 패키지
"""
from .services import (
    NetworkId,
    detect_blockchain,
    validate_address,
    verify_address,
    get_explorer_url,
    get_transaction_explorer_url,
    detect_transaction_network,
    validate_transaction_hash,
    verify_transaction,
    format_blockchain_name,
    get_supported_blockchains,
    BlockchainVerifier,
    VerifierSettings,
    InconclusiveVerificationPolicy,
    AddressValidationResult,
    AddressVerificationResult,
    TransactionValidationResult,
    TransactionVerificationResult,
)

__all__ = [
    'NetworkId',
    'detect_blockchain',
    'validate_address',
    'verify_address',
    'get_explorer_url',
    'get_transaction_explorer_url',
    'detect_transaction_network',
    'validate_transaction_hash',
    'verify_transaction',
    'format_blockchain_name',
    'get_supported_blockchains',
    'BlockchainVerifier',
    'VerifierSettings',
    'InconclusiveVerificationPolicy',
    'AddressValidationResult',
    'AddressVerificationResult',
    'TransactionValidationResult',
    'TransactionVerificationResult',
]
