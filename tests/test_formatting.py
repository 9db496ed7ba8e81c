import math

import pytest

from salary_timer.config import TimerConfig
from salary_timer.formatting import formatCurrency, formatElapsed


class TestFormatCurrency:
    def test_italian_default(self):
        assert formatCurrency(1850) == "1.850,0000\u00a0€"

    def test_small_rate(self):
        assert formatCurrency(1850 / (160 * 3600)) == "0,0032\u00a0€"

    def test_zero(self):
        assert formatCurrency(0) == "0,0000\u00a0€"

    def test_millions(self):
        assert formatCurrency(1234567.891) == "1.234.567,8910\u00a0€"

    def test_negative(self):
        assert formatCurrency(-2.5) == "-2,5000\u00a0€"

    def test_symbol_after_does_not_break(self):
        assert " " not in formatCurrency(1850)
        assert formatCurrency(1850).endswith("\u00a0€")

    def test_symbol_before(self):
        config = TimerConfig(
            currency_symbol="$", symbol_after=False,
            thousands_sep=",", decimal_sep=".", fraction_digits=2,
        )
        assert formatCurrency(2500, config) == "$ 2,500.00"


class TestFormatElapsed:
    @pytest.mark.parametrize("seconds, expected", [
        (0, "00:00:00"),
        (59.9, "00:00:59"),
        (61, "00:01:01"),
        (3600 * 2 + 60 * 3 + 4, "02:03:04"),
        (3600 * 30, "30:00:00"),
    ])
    def test_hh_mm_ss(self, seconds, expected):
        assert formatElapsed(seconds) == expected

    @pytest.mark.parametrize("seconds", [math.nan, math.inf, -5])
    def test_garbage_is_zero(self, seconds):
        assert formatElapsed(seconds) == "00:00:00"
