# Services package
from .cache import SimpleCache
from .chain_configs import NetworkId, PatternRule, ADDRESS_PATTERNS, TX_HASH_PATTERNS
from .address_service import (
    detect_blockchain,
    validate_address,
    get_explorer_url,
    get_transaction_explorer_url,
    format_blockchain_name,
    get_supported_blockchains,
)
from .transaction_service import detect_transaction_network, validate_transaction_hash
from .verification_service import BlockchainVerifier, VerifierSettings, verify_address, verify_transaction
from .models import (
    InconclusiveVerificationPolicy,
    AddressValidationResult,
    AddressVerificationResult,
    TransactionValidationResult,
    TransactionVerificationResult,
)

__all__ = [
    "SimpleCache",
    "NetworkId",
    "PatternRule",
    "ADDRESS_PATTERNS",
    "TX_HASH_PATTERNS",
    "detect_blockchain",
    "validate_address",
    "get_explorer_url",
    "get_transaction_explorer_url",
    "format_blockchain_name",
    "get_supported_blockchains",
    "detect_transaction_network",
    "validate_transaction_hash",
    "BlockchainVerifier",
    "VerifierSettings",
    "verify_address",
    "verify_transaction",
    "InconclusiveVerificationPolicy",
    "AddressValidationResult",
    "AddressVerificationResult",
    "TransactionValidationResult",
    "TransactionVerificationResult",
]
