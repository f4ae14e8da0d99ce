"""
Tests for raw transfer normalization and filtering.

Covers key mapping from the blockchain-data API shapes, deduplication and
the amount and token filters.
"""

import pytest

from conftest import NOW, DAY, WALLET, OTHER, WHALE, DEX, make_tx
from wallet_profiler.core.normalizer import (
    TOKEN_SOL,
    TOKEN_USDC,
    TOKEN_USDT,
    deduplicate_transactions,
    filter_transactions_by_amount,
    filter_transactions_by_token,
    is_large_transaction,
    normalize_transaction,
    normalize_transactions
)
from wallet_profiler.exceptions import InvalidInputError
from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.models.wallet_data import Transaction


class TestNormalization:
    """Tests for record to Transaction mapping."""

    def test_maps_both_key_styles(self, raw_transfers):
        transactions = normalize_transactions(raw_transfers)

        assert len(transactions) == 3
        assert transactions[0].source == OTHER
        assert transactions[0].destination == WALLET
        assert transactions[0].lamports == 2_500_000_000
        assert transactions[0].flow == "in"
        assert transactions[0].tx_id == "5h6xBEauJ3PK6SWCZ1PGjBvj8vDdWG3KpwATGy1ARAXF"

        assert transactions[2].source == WHALE
        assert transactions[2].destination == WALLET
        assert transactions[2].block_time == NOW
        assert transactions[2].amount_sol == pytest.approx(12000.0)
        assert transactions[2].tx_id is None

    def test_defaults(self):
        tx = normalize_transaction({"block_time": NOW, "amount": 5})

        assert tx.source is None
        assert tx.destination is None
        assert tx.token_address is None
        assert tx.token_decimals == 9

    def test_numeric_strings_accepted(self):
        tx = normalize_transaction({"blockTime": str(NOW), "lamport": "1000"})

        assert tx.block_time == NOW
        assert tx.lamports == 1000

    def test_missing_amount_rejected(self, raw_transfers):
        del raw_transfers[1]["amount"]

        with pytest.raises(InvalidInputError) as exc_info:
            normalize_transactions(raw_transfers)

        assert exc_info.value.details == {'index': 1, 'field': 'amount'}

    @pytest.mark.parametrize("value", [-1, "abc", True])
    def test_bad_time_rejected(self, value):
        with pytest.raises(InvalidInputError):
            normalize_transaction({"block_time": value, "amount": 1})

    def test_fractional_amount_rejected(self):
        """Test a fractional lamport amount is rejected rather than truncated."""
        with pytest.raises(InvalidInputError) as exc_info:
            normalize_transactions([{"block_time": NOW, "amount": 1.5}])

        assert exc_info.value.details['field'] == 'amount'

    def test_integral_float_accepted(self):
        tx = normalize_transaction({"block_time": float(NOW), "amount": 2.0})

        assert tx.block_time == NOW
        assert tx.lamports == 2

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_amount_rejected(self, value):
        with pytest.raises(InvalidInputError):
            normalize_transactions([{"block_time": NOW, "amount": value}])

    @pytest.mark.parametrize("record", [42, "sig", None, [NOW, 1]])
    def test_non_object_record_rejected(self, record):
        """Test list elements that are not objects raise InvalidInputError."""
        with pytest.raises(InvalidInputError) as exc_info:
            normalize_transactions([{"block_time": NOW, "amount": 1}, record])

        assert exc_info.value.details == {'index': 1}

    def test_zero_token_decimals_kept(self):
        tx = normalize_transaction({"block_time": NOW, "amount": 5, "token_decimals": 0})

        assert tx.token_decimals == 0

    def test_lamport_key_preferred_over_amount(self):
        tx = normalize_transaction({"block_time": NOW, "lamport": 7, "amount": 3})

        assert tx.lamports == 7

    @pytest.mark.parametrize("payload", [None, {}, "transfers", 42])
    def test_non_list_yields_empty(self, payload):
        assert normalize_transactions(payload) == []


class TestDeduplication:
    """Tests for duplicate removal."""

    def test_by_transaction_id(self):
        first = make_tx(NOW, sol=1, tx_id="sig-1")
        duplicate = make_tx(NOW + 60, sol=2, tx_id="sig-1")
        other = make_tx(NOW + 120, sol=3, tx_id="sig-2")

        assert deduplicate_transactions([first, duplicate, other]) == [first, other]

    def test_by_composite_key(self):
        first = make_tx(NOW, sol=1)
        same = make_tx(NOW, sol=1)
        different = make_tx(NOW, sol=1, source=WHALE)

        assert deduplicate_transactions([first, same, different]) == [first, different]


class TestFilters:
    """Tests for amount and token filters."""

    def test_amount_filter_inclusive(self):
        transactions = [make_tx(NOW, sol=10000), make_tx(NOW, sol=9999), make_tx(NOW, sol=50000)]

        kept = filter_transactions_by_amount(transactions)

        assert [tx.amount_sol for tx in kept] == [10000, 50000]
        assert len(filter_transactions_by_amount(transactions, threshold_sol=1)) == 3

    def test_token_filter(self):
        native = make_tx(NOW, destination=DEX)
        usdc = Transaction(OTHER, WALLET, NOW, 1, token_address=TOKEN_USDC, token_decimals=6)
        usdt = Transaction(OTHER, WALLET, NOW + DAY, 1, token_address=TOKEN_USDT, token_decimals=6)
        transactions = [native, usdc, usdt]

        assert filter_transactions_by_token(transactions) == transactions
        assert filter_transactions_by_token(transactions, 'sol') == [native]
        assert filter_transactions_by_token(transactions, 'USDC') == [usdc]
        assert filter_transactions_by_token(transactions, TOKEN_USDT) == [usdt]


class TestLargeTransaction:
    """Tests for per-token large transfer detection."""

    def test_default_thresholds(self):
        assert is_large_transaction(10000)
        assert not is_large_transaction(9999.99)
        assert is_large_transaction(25000, TOKEN_USDC)
        assert not is_large_transaction(500, TOKEN_USDT)

    def test_unknown_token_never_large(self):
        assert not is_large_transaction(10 ** 12, "So11111111111111111111111111111111111111112")

    def test_configured_thresholds(self):
        config = ProfilerConfig(large_transfer_threshold_sol=100, large_usdt_threshold=50)

        assert is_large_transaction(100, TOKEN_SOL, config)
        assert is_large_transaction(60, TOKEN_USDT, config)
        assert not is_large_transaction(60, TOKEN_USDC, config)
