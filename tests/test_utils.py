"""Tests for statistics helpers, formatting, logging setup and errors."""

import logging

import pytest
import structlog

from wallet_profiler.exceptions import InvalidInputError, WalletProfilerError
from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.utils import (
    clamp,
    consecutive_gap_ratios,
    consecutive_gaps,
    format_address,
    format_sol,
    population_std,
    safe_mean,
    safe_ratio
)
from wallet_profiler.utils.logging import setup_logging


class TestStatistics:

    def test_population_std(self):
        assert population_std([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)
        assert population_std([]) == 0.0

    def test_safe_helpers(self):
        assert safe_mean([]) == 0.0
        assert safe_mean([1, 2, 3]) == pytest.approx(2.0)
        assert safe_ratio(5, 0) == 0.0
        assert safe_ratio(5, 0, default=-1) == -1
        assert safe_ratio(6, 3) == 2

    def test_gaps_and_ratios(self):
        gaps = consecutive_gaps([10, 10, 30, 70])

        assert gaps == [0, 20, 40]
        assert consecutive_gap_ratios(gaps) == [2.0]

    def test_clamp(self):
        assert clamp(12.5, 0, 10) == 10
        assert clamp(-1, 0, 10) == 0
        assert clamp(3, 0, 10) == 3


class TestFormatting:

    def test_format_address(self):
        assert format_address("7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU") == "7xKXtg...osgAsU"
        assert format_address("short") == "short"
        assert format_address(None) == ""

    @pytest.mark.parametrize("lamports,expected", [
        (1_500_000_000, "1.50"),
        (12_345_000_000_000, "12,345.00"),
        (1_234_567_891, "1.234567891"),
        (0, "0.00"),
    ])
    def test_format_sol(self, lamports, expected):
        assert format_sol(lamports) == expected


class TestLogging:
    """Smoke tests for structured logging setup."""

    def test_json_logging(self):
        setup_logging(ProfilerConfig(log_level="INFO", log_format="json"))

        structlog.get_logger("wallet_profiler.test").info("Logging configured", check=True)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "profiler.log"

        setup_logging(ProfilerConfig(log_format="text", log_file=str(log_file)))

        assert log_file.parent.exists()
        handlers = [h for h in logging.getLogger().handlers if getattr(h, 'baseFilename', None) == str(log_file)]
        assert handlers
        for handler in handlers:
            logging.getLogger().removeHandler(handler)
            handler.close()


class TestErrors:

    def test_error_to_dict(self):
        error = InvalidInputError("bad record", details={'index': 3})

        data = error.to_dict()

        assert isinstance(error, WalletProfilerError)
        assert data['error_type'] == "InvalidInputError"
        assert data['message'] == "bad record"
        assert data['details'] == {'index': 3}
        assert 'timestamp' in data
        assert str(error) == "bad record"
