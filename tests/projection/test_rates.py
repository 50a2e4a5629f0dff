"""Tests for risk-adjusted rate calculation"""

import pytest

from artha_app.projection.rates import adjust_rate


class TestAdjustRate:
    """Test the linear risk adjustment heuristic"""

    @pytest.mark.parametrize("rate", [0.0, 5.75, 12.5, -3.0])
    @pytest.mark.parametrize("risk", [1, 5, 10])
    def test_equal_risk_and_tolerance_unchanged(self, rate, risk):
        """Test no adjustment when instrument risk equals tolerance"""
        assert adjust_rate(rate, risk, risk) == rate

    def test_riskier_instrument_scaled_up(self):
        """Test 12% at risk 8 for tolerance 5"""
        # 12 * (1 + 3 * 0.01) = 12.36
        assert adjust_rate(12.0, 8, 5) == pytest.approx(12.36)

    def test_safer_instrument_scaled_down(self):
        """Test 6% at risk 1 for tolerance 5"""
        # 6 * (1 - 4 * 0.01) = 5.76
        assert adjust_rate(6.0, 1, 5) == pytest.approx(5.76)

    def test_custom_step(self):
        """Test custom adjustment step"""
        assert adjust_rate(10.0, 10, 1, step=0.05) == pytest.approx(14.5)

    def test_no_bounds_applied(self):
        """Test extreme mismatch with a large step can go negative"""
        assert adjust_rate(10.0, 1, 10, step=0.2) < 0

    def test_zero_rate_stays_zero(self):
        """Test zero nominal rate is unaffected by mismatch"""
        assert adjust_rate(0.0, 10, 1) == 0.0
