"""
Rounding Tests - Unit Tests for the Monetary Rounding Policy

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- domain_quotes.shared.rounding (round2, round_whole, round_amount)
- pytest (testing framework)
"""
import math

import pytest  # Testing framework for writing and running tests

from domain_quotes.shared.rounding import round2, round_amount, round_whole


class TestRound2:
    def test_two_decimals(self):
        assert round2(9.876) == 9.88
        assert round2(0.9000000000000001) == 0.9

    def test_ties_follow_binary_value(self):
        # 0.675 is stored slightly above the tie, 1.005 slightly below
        assert round2(0.675) == 0.68
        assert round2(1.005) == 1.0

    def test_exact_tie_rounds_away_from_zero(self):
        assert round2(0.125) == 0.13
        assert round2(-0.125) == -0.13


class TestRoundWhole:
    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (9.9, 10)])
    def test_half_up(self, value, expected):
        assert round_whole(value) == expected


class TestRoundAmount:
    def test_modes(self):
        assert round_amount(0.9) == 1
        assert round_amount(0.9, allow_fractional=True) == 0.9

    def test_default_is_integer_mode(self):
        assert round_amount(4.5) == 5

    def test_no_negative_zero(self):
        result = round_amount(-0.2)
        assert result == 0
        assert math.copysign(1.0, result) == 1.0
