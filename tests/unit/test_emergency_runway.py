"""Tests for emergency fund runway."""

import math

import pytest

from moneycalc.sdk import EmergencyFundRunwayInputs, compute_emergency_fund_runway


def runway(balance, spending, income=0):
    return compute_emergency_fund_runway(EmergencyFundRunwayInputs(
        emergency_fund_balance=balance,
        monthly_essential_spending=spending,
        monthly_income_during_emergency=income,
    ))


class TestRunway:
    """Runway = balance / (spending - income)."""

    def test_simple_runway(self):
        """6000 fund, 1500 spending, 500 income -> 6 months, 26 weeks."""
        r = runway(6_000, 1_500, 500)
        assert r.net_monthly_burn == 1_000
        assert r.runway_months == pytest.approx(6)
        assert r.runway_weeks == pytest.approx(26)
        assert not r.is_unbounded

    def test_income_covers_spending(self):
        """Negative burn means the fund is never drawn down."""
        r = runway(10_000, 2_000, 2_500)
        assert r.net_monthly_burn == -500
        assert r.runway_months == math.inf
        assert r.runway_weeks == math.inf
        assert r.is_unbounded

    def test_income_equals_spending(self):
        """Zero burn is also unbounded."""
        r = runway(10_000, 2_000, 2_000)
        assert r.net_monthly_burn == 0
        assert r.runway_months == math.inf

    def test_empty_fund(self):
        """No cash and a positive burn means zero runway."""
        r = runway(0, 1_000)
        assert r.runway_months == 0
        assert r.runway_weeks == 0


class TestRunwaySanitization:
    """Invalid inputs degrade to zero."""

    def test_clamps_non_finite_and_negative(self):
        """NaN, negative and infinite inputs are echoed as zero."""
        r = runway(math.nan, -500, math.inf)
        assert r.inputs.emergency_fund_balance == 0
        assert r.inputs.monthly_essential_spending == 0
        assert r.inputs.monthly_income_during_emergency == 0
        assert r.net_monthly_burn == 0
        assert r.runway_months == math.inf
