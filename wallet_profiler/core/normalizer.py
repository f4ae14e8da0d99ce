"""Normalization of raw transfer records into Transaction objects."""

from typing import Any, Dict, Iterable, List, Optional
import structlog

from wallet_profiler.exceptions import InvalidInputError
from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.models.wallet_data import Transaction

logger = structlog.get_logger(__name__)

TOKEN_SOL = 'SOL'
TOKEN_USDC = 'EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v'
TOKEN_USDT = 'Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB'

TOKEN_ALIASES = {
    'usdc': TOKEN_USDC,
    'usdt': TOKEN_USDT,
}


def _first_present(record: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None and value != '':
            return value
    return None


def _to_non_negative_int(value: Any, field_name: str, index: int) -> int:
    if value is None or isinstance(value, bool):
        raise InvalidInputError(f"Transaction {index} is missing {field_name}",
                                details={'index': index, 'field': field_name})
    if isinstance(value, float) and not value.is_integer():
        raise InvalidInputError(f"Transaction {index} has non-integral {field_name}",
                                details={'index': index, 'field': field_name, 'value': value})
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidInputError(f"Transaction {index} has non-numeric {field_name}",
                                details={'index': index, 'field': field_name, 'value': value}) from e
    if number < 0:
        raise InvalidInputError(f"Transaction {index} has negative {field_name}",
                                details={'index': index, 'field': field_name, 'value': value})
    return number


def normalize_transaction(record: Dict[str, Any], index: int = 0) -> Transaction:
    """Map a single raw API record onto the Transaction shape."""
    if not isinstance(record, dict):
        raise InvalidInputError(f"Transaction {index} is not an object",
                                details={'index': index})

    block_time = _to_non_negative_int(
        _first_present(record, 'block_time', 'blockTime'), 'block_time', index
    )
    lamports = _to_non_negative_int(
        _first_present(record, 'lamport', 'amount'), 'amount', index
    )

    token_decimals = record.get('token_decimals')
    if token_decimals is None:
        token_decimals = 9
    else:
        token_decimals = _to_non_negative_int(token_decimals, 'token_decimals', index)

    return Transaction(
        source=_first_present(record, 'from_address', 'src'),
        destination=_first_present(record, 'to_address', 'dst'),
        block_time=block_time,
        lamports=lamports,
        tx_id=_first_present(record, 'trans_id', 'tx_hash', 'signature'),
        token_address=record.get('token_address') or None,
        token_decimals=token_decimals,
        flow=record.get('flow')
    )


def normalize_transactions(records: Any) -> List[Transaction]:
    """
    Map raw transfer records from the blockchain-data API to Transactions.

    Args:
        records: List of raw transfer dicts; anything else yields []

    Returns:
        List of Transaction objects in input order

    Raises:
        InvalidInputError: if a record is not an object or lacks a usable
            time or amount
    """
    if not isinstance(records, list):
        return []

    transactions = [normalize_transaction(record, index) for index, record in enumerate(records)]

    logger.debug("Transactions normalized", count=len(transactions))

    return transactions


def _dedup_key(tx: Transaction) -> str:
    if tx.tx_id:
        return tx.tx_id
    return f"{tx.source}-{tx.destination}-{tx.block_time}-{tx.lamports}"


def deduplicate_transactions(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Keep the first occurrence of each transaction id (or composite key)."""
    seen = set()
    unique = []

    for tx in transactions:
        key = _dedup_key(tx)
        if key not in seen:
            seen.add(key)
            unique.append(tx)

    return unique


def filter_transactions_by_amount(transactions: Iterable[Transaction],
                                  threshold_sol: float = 10000) -> List[Transaction]:
    """Keep transfers of at least ``threshold_sol`` SOL."""
    return [tx for tx in transactions if tx.amount_sol >= threshold_sol]


def filter_transactions_by_token(transactions: Iterable[Transaction],
                                 token: str = 'all') -> List[Transaction]:
    """
    Filter transfers by token.

    'all' keeps everything, 'sol' keeps native transfers (no token address),
    'usdc'/'usdt' or any mint address keeps transfers of that token.
    """
    transactions = list(transactions)
    if token == 'all':
        return transactions

    if token.lower() == 'sol':
        return [tx for tx in transactions if not tx.token_address]

    mint = TOKEN_ALIASES.get(token.lower(), token)
    return [tx for tx in transactions if tx.token_address == mint]


def is_large_transaction(amount: float, token: str = TOKEN_SOL,
                         config: Optional[ProfilerConfig] = None) -> bool:
    """Whether an amount (token units) meets the large-transfer threshold for its token."""
    thresholds = (config or ProfilerConfig()).get_large_thresholds()

    if token == TOKEN_SOL:
        return amount >= thresholds['SOL']
    if token == TOKEN_USDC:
        return amount >= thresholds['USDC']
    if token == TOKEN_USDT:
        return amount >= thresholds['USDT']
    return False
