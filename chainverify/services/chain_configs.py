#chain_configs.py

import re
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Callable, NamedTuple, Optional


class NetworkId(str, Enum):
    """지원하는 블록체인 네트워크 식별자"""
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    LITECOIN = "litecoin"
    BITCOINCASH = "bitcoincash"
    DOGECOIN = "dogecoin"
    RIPPLE = "ripple"
    SOLANA = "solana"
    CARDANO = "cardano"
    POLKADOT = "polkadot"
    TRON = "tron"
    COSMOS = "cosmos"


class PatternRule(NamedTuple):
    """네트워크 하나와 그 문자열 판별 함수의 쌍"""
    network: NetworkId
    matcher: Callable[[str], bool]


BASE58 = "1-9A-HJ-NP-Za-km-z"


def _regex_rule(network: NetworkId, pattern: str, flags: int = 0) -> PatternRule:
    compiled = re.compile(pattern, flags)
    return PatternRule(network, lambda value: compiled.fullmatch(value) is not None)


# 주소 패턴 레지스트리. 위에서부터 순서대로 평가하며 처음 일치한 네트워크를 반환한다.
# solana 규칙은 일반 base58 문자열 전체와 겹치므로 그 아래의 tron 주소(T...)는 solana로 분류된다.
ADDRESS_PATTERNS: tuple = (
    # Bitcoin (Legacy, SegWit, Native SegWit, Taproot)
    _regex_rule(
        NetworkId.BITCOIN,
        rf"1[{BASE58}]{{25,34}}|3[{BASE58}]{{25,34}}|bc1[a-zA-HJ-NP-Z0-9]{{39,59}}|bc1p[a-zA-HJ-NP-Z0-9]{{58}}",
    ),
    # Ethereum 및 EVM 호환 체인
    _regex_rule(NetworkId.ETHEREUM, r"0x[a-fA-F0-9]{40}"),
    _regex_rule(
        NetworkId.LITECOIN,
        rf"L[{BASE58}]{{26,33}}|M[{BASE58}]{{26,33}}|ltc1[a-zA-HJ-NP-Z0-9]{{39,59}}",
    ),
    _regex_rule(NetworkId.BITCOINCASH, r"(bitcoincash:)?[qp][a-z0-9]{41}", re.IGNORECASE),
    _regex_rule(NetworkId.DOGECOIN, rf"D[5-9A-HJ-NP-U][{BASE58}]{{32}}"),
    _regex_rule(NetworkId.RIPPLE, rf"r[{BASE58}]{{24,34}}"),
    _regex_rule(NetworkId.SOLANA, rf"[{BASE58}]{{32,44}}"),
    # Cardano (Shelley)
    _regex_rule(NetworkId.CARDANO, r"addr1[a-z0-9]{98,}"),
    _regex_rule(NetworkId.POLKADOT, r"1[a-zA-Z0-9]{47}"),
    _regex_rule(NetworkId.TRON, r"T[a-zA-Z0-9]{33}"),
    _regex_rule(NetworkId.COSMOS, r"cosmos1[a-z0-9]{38}"),
)

# 트랜잭션 해시 패턴. 64자리 hex는 여러 체인이 공유하므로 힌트 없이 감지하면 bitcoin이 된다.
TX_HASH_PATTERNS: tuple = (
    _regex_rule(NetworkId.BITCOIN, r"[a-fA-F0-9]{64}"),
    _regex_rule(NetworkId.ETHEREUM, r"0x[a-fA-F0-9]{64}"),
    _regex_rule(NetworkId.LITECOIN, r"[a-fA-F0-9]{64}"),
    _regex_rule(NetworkId.DOGECOIN, r"[a-fA-F0-9]{64}"),
    _regex_rule(NetworkId.TRON, r"[a-fA-F0-9]{64}"),
    _regex_rule(NetworkId.SOLANA, rf"[{BASE58}]{{88}}"),
)

DEFAULT_SUB_FORMAT = "standard"

# 네트워크별 세부 포맷 (접두사, 표시 이름). 순서대로 첫 번째 일치를 사용한다.
SUB_FORMAT_RULES = {
    NetworkId.BITCOIN: (
        ("1", "P2PKH (Legacy)"),
        ("3", "P2SH (SegWit)"),
        ("bc1q", "Bech32 (Native SegWit)"),
        ("bc1p", "Bech32m (Taproot)"),
    ),
    NetworkId.ETHEREUM: (
        ("", "ERC-20 Compatible"),
    ),
}

ADDRESS_EXPLORERS = {
    NetworkId.BITCOIN: "https://blockchain.info/address/{address}",
    NetworkId.ETHEREUM: "https://etherscan.io/address/{address}",
    NetworkId.LITECOIN: "https://blockchair.com/litecoin/address/{address}",
    NetworkId.BITCOINCASH: "https://blockchair.com/bitcoin-cash/address/{address}",
    NetworkId.DOGECOIN: "https://dogechain.info/address/{address}",
    NetworkId.RIPPLE: "https://xrpscan.com/account/{address}",
    NetworkId.SOLANA: "https://explorer.solana.com/address/{address}",
    NetworkId.CARDANO: "https://cardanoscan.io/address/{address}",
    NetworkId.POLKADOT: "https://polkascan.io/polkadot/account/{address}",
    NetworkId.TRON: "https://tronscan.org/#/address/{address}",
    NetworkId.COSMOS: "https://www.mintscan.io/cosmos/account/{address}",
}

TRANSACTION_EXPLORERS = {
    NetworkId.BITCOIN: "https://blockchain.info/tx/{hash}",
    NetworkId.ETHEREUM: "https://etherscan.io/tx/{hash}",
    NetworkId.LITECOIN: "https://blockchair.com/litecoin/transaction/{hash}",
    NetworkId.DOGECOIN: "https://dogechain.info/tx/{hash}",
    NetworkId.TRON: "https://tronscan.org/#/transaction/{hash}",
    NetworkId.SOLANA: "https://explorer.solana.com/tx/{hash}",
}

DISPLAY_NAMES = {
    NetworkId.BITCOIN: "Bitcoin (BTC)",
    NetworkId.ETHEREUM: "Ethereum (ETH)",
    NetworkId.LITECOIN: "Litecoin (LTC)",
    NetworkId.BITCOINCASH: "Bitcoin Cash (BCH)",
    NetworkId.DOGECOIN: "Dogecoin (DOGE)",
    NetworkId.RIPPLE: "Ripple (XRP)",
    NetworkId.SOLANA: "Solana (SOL)",
    NetworkId.CARDANO: "Cardano (ADA)",
    NetworkId.POLKADOT: "Polkadot (DOT)",
    NetworkId.TRON: "TRON (TRX)",
    NetworkId.COSMOS: "Cosmos (ATOM)",
}


def format_amount(raw_amount, decimals: int, places: int, symbol: str) -> str:
    """최소 단위 정수(satoshi, wei 등)를 표시용 문자열로 변환"""
    value = Decimal(int(raw_amount)) / (Decimal(10) ** decimals)
    return f"{value:.{places}f} {symbol}"


def optional_int(value) -> Optional[int]:
    """응답의 정수 필드를 검사. 정수로 해석할 수 없으면 ValueError/TypeError"""
    if value is None:
        return None
    if isinstance(value, bool) or isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected integer, got {value!r}")
    return int(value)


def normalize_blockcypher_balance(res: dict, symbol: str) -> dict:
    """BlockCypher /addrs/{address}/balance 응답 정규화 (litecoin, dogecoin)"""
    return {
        "exists": True,
        "balance": format_amount(res["balance"], 8, 8, symbol),
        "transaction_count": optional_int(res.get("n_tx")),
    }


def normalize_etherscan_balance(res: dict) -> dict:
    # status가 "1"이 아니면 아직 사용되지 않은 주소일 수 있으므로 존재하는 것으로 본다
    if res.get("status") == "1":
        return {"exists": True, "balance": format_amount(res["result"], 18, 6, "ETH")}
    return {"exists": True}


def normalize_tronscan_account(res: dict) -> dict:
    if res.get("balance") is None:
        return {"exists": True, "transaction_count": optional_int(res.get("totalTransactionCount"))}
    return {
        "exists": True,
        "balance": format_amount(res["balance"], 6, 6, "TRX"),
        "transaction_count": optional_int(res.get("totalTransactionCount")),
    }


def normalize_bitcoin_transaction(res: dict) -> dict:
    """blockchain.info /rawtx 응답 정규화"""
    block_height = optional_int(res.get("block_height"))
    timestamp = None
    if res.get("time"):
        timestamp = datetime.fromtimestamp(int(res["time"]), tz=timezone.utc).isoformat()
    return {
        "exists": True,
        "confirmed": block_height is not None,
        "block_number": block_height,
        "timestamp": timestamp,
    }


def normalize_etherscan_receipt(res: dict) -> dict:
    result = res.get("result")
    if res.get("status") == "1" and result:
        return {"exists": True, "confirmed": result.get("status") == "1"}
    return {"exists": False, "confirmed": False}


def get_address_adapters():
    """주소 존재 확인용 네트워크별 어댑터 설정"""
    return {
        NetworkId.BITCOIN: {
            "api": lambda address: f"https://blockchain.info/rawaddr/{address}?limit=0",
            "not_found_on_404": True,
            "normalize": lambda res: {
                "exists": True,
                "balance": format_amount(res["final_balance"], 8, 8, "BTC"),
                "transaction_count": optional_int(res["n_tx"]),
            },
        },
        NetworkId.ETHEREUM: {
            "api": lambda address: f"https://api.etherscan.io/api?module=account&action=balance&address={address}&tag=latest",
            "api_key_param": "apikey",
            "normalize": normalize_etherscan_balance,
        },
        NetworkId.LITECOIN: {
            "api": lambda address: f"https://api.blockcypher.com/v1/ltc/main/addrs/{address}/balance",
            "not_found_on_404": True,
            "normalize": lambda res: normalize_blockcypher_balance(res, "LTC"),
        },
        NetworkId.DOGECOIN: {
            "api": lambda address: f"https://api.blockcypher.com/v1/doge/main/addrs/{address}/balance",
            "not_found_on_404": True,
            "normalize": lambda res: normalize_blockcypher_balance(res, "DOGE"),
        },
        NetworkId.TRON: {
            "api": lambda address: f"https://apilist.tronscan.org/api/account?address={address}",
            "normalize": normalize_tronscan_account,
        },
    }


def get_transaction_adapters():
    """트랜잭션 존재/컨펌 확인용 네트워크별 어댑터 설정"""
    return {
        NetworkId.BITCOIN: {
            "api": lambda tx_hash: f"https://blockchain.info/rawtx/{tx_hash}",
            "not_found_on_404": True,
            "normalize": normalize_bitcoin_transaction,
        },
        NetworkId.ETHEREUM: {
            "api": lambda tx_hash: f"https://api.etherscan.io/api?module=transaction&action=gettxreceiptstatus&txhash={tx_hash}",
            "api_key_param": "apikey",
            "normalize": normalize_etherscan_receipt,
        },
    }


def find_network(value: str) -> Optional[NetworkId]:
    """문자열을 NetworkId로 변환. 알 수 없는 값이면 None"""
    if isinstance(value, NetworkId):
        return value
    try:
        return NetworkId(str(value).strip().lower())
    except ValueError:
        return None
