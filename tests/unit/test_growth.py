"""Tests for compound growth and inflation-adjusted growth.

Closed forms used for checking, with per-period factor A over n periods:
- End of period:   FV = P*A^n + PMT*(A^n - 1)/(A - 1)
- Start of period: FV = P*A^n + PMT*A*(A^n - 1)/(A - 1)
"""

import logging
import math

import pytest

from moneycalc.sdk import (
    MAX_TOTAL_PERIODS,
    CompoundGrowthInputs,
    CompoundGrowthYear,
    ContributionTiming,
    InflationAdjustedGrowthInputs,
    InflationAdjustedGrowthYear,
    compute_compound_growth,
    compute_inflation_adjusted_growth,
)


def closed_form(start: float, pmt: float, factor: float, periods: int, start_of_period: bool = False) -> float:
    """Future value of a pot with level contributions."""
    if periods == 0:
        return start
    grown = factor ** periods
    if factor == 1:
        return start + pmt * periods
    annuity = pmt * (grown - 1) / (factor - 1)
    if start_of_period:
        annuity *= factor
    return start * grown + annuity


def growth(**kwargs) -> CompoundGrowthInputs:
    """Compound growth inputs with zero defaults."""
    base = {"starting_balance": 0, "monthly_contribution": 0, "annual_rate_pct": 0, "years": 0}
    base.update(kwargs)
    return CompoundGrowthInputs(**base)


class TestCompoundGrowth:
    """Core compounding behaviour."""

    def test_zeros(self):
        """All-zero inputs produce an empty projection."""
        r = compute_compound_growth(growth())
        assert r.final_balance == 0
        assert r.total_contributed == 0
        assert r.total_growth == 0
        assert r.yearly == ()

    def test_years_zero_leaves_balance_unchanged(self):
        """With no periods to run the starting balance is returned as is."""
        r = compute_compound_growth(growth(starting_balance=1_234, monthly_contribution=50,
                                           annual_rate_pct=7, years=0))
        assert r.final_balance == 1_234
        assert r.total_growth == 0
        assert r.yearly == ()

    @pytest.mark.parametrize("timing", list(ContributionTiming))
    def test_zero_rate_is_linear(self, timing):
        """At 0% the pot is start + contributions exactly, for either timing."""
        r = compute_compound_growth(growth(starting_balance=1_000, monthly_contribution=100,
                                           years=2, contribution_timing=timing))
        assert r.final_balance == 1_000 + 100 * 12 * 2
        assert r.total_contributed == 2_400
        assert r.total_growth == 0
        assert len(r.yearly) == 2

    def test_matches_closed_form_end_of_period(self):
        """5000 start, 250/month, 6%, 10 years, monthly: ordinary annuity."""
        r = compute_compound_growth(growth(starting_balance=5_000, monthly_contribution=250,
                                           annual_rate_pct=6, years=10, periods_per_year=12))
        expected = closed_form(5_000, 250, 1 + 0.06 / 12, 120)
        assert r.final_balance == pytest.approx(expected, rel=1e-6)

    def test_matches_closed_form_start_of_period(self):
        """Start-of-period contributions earn one extra period of growth."""
        r = compute_compound_growth(growth(starting_balance=5_000, monthly_contribution=250,
                                           annual_rate_pct=6, years=10,
                                           contribution_timing=ContributionTiming.START_OF_PERIOD))
        expected = closed_form(5_000, 250, 1 + 0.06 / 12, 120, start_of_period=True)
        assert r.final_balance == pytest.approx(expected, rel=1e-6)

    def test_start_of_period_beats_end_of_period(self):
        """For a positive rate, contributing earlier always ends higher."""
        common = dict(starting_balance=1_000, monthly_contribution=100, annual_rate_pct=4, years=5)
        start = compute_compound_growth(growth(contribution_timing=ContributionTiming.START_OF_PERIOD, **common))
        end = compute_compound_growth(growth(contribution_timing=ContributionTiming.END_OF_PERIOD, **common))
        assert start.final_balance > end.final_balance
        assert start.total_contributed == end.total_contributed

    def test_default_timing_is_end_of_period(self):
        """Contribution timing defaults to end of period."""
        r = compute_compound_growth(growth(monthly_contribution=100, annual_rate_pct=5, years=1))
        assert r.inputs.contribution_timing == ContributionTiming.END_OF_PERIOD
        assert r.inputs.periods_per_year == 12

    def test_fee_reduces_final_balance(self):
        """Any positive fee lowers the final balance."""
        common = dict(starting_balance=10_000, monthly_contribution=200, annual_rate_pct=5, years=20)
        no_fee = compute_compound_growth(growth(**common))
        with_fee = compute_compound_growth(growth(annual_fee_pct=0.25, **common))
        assert with_fee.final_balance < no_fee.final_balance

    def test_fee_matches_closed_form(self):
        """Growth and fee combine into one factor per period."""
        r = compute_compound_growth(growth(starting_balance=10_000, monthly_contribution=200,
                                           annual_rate_pct=5, annual_fee_pct=1, years=20))
        factor = (1 + 0.05 / 12) * (1 - 0.01 / 12)
        assert r.final_balance == pytest.approx(closed_form(10_000, 200, factor, 240), rel=1e-9)

    def test_annual_compounding_scales_monthly_contribution(self):
        """With one period per year the monthly amount becomes 12x per period."""
        r = compute_compound_growth(growth(monthly_contribution=100, annual_rate_pct=12,
                                           years=3, periods_per_year=1))
        assert r.total_contributed == pytest.approx(1_200 * 3)
        assert r.final_balance == pytest.approx(closed_form(0, 1_200, 1.12, 3))
        assert r.final_balance > r.total_contributed

    def test_yearly_snapshots(self):
        """One snapshot per year; growth = balance - start - contributed."""
        r = compute_compound_growth(growth(starting_balance=500, monthly_contribution=100,
                                           annual_rate_pct=5, years=10))
        assert [row.year for row in r.yearly] == list(range(1, 11))
        for row in r.yearly:
            assert isinstance(row, CompoundGrowthYear)
            assert row.total_contributed == pytest.approx(1_200 * row.year)
            assert row.total_growth == pytest.approx(row.end_balance - 500 - row.total_contributed)
        assert r.yearly[-1].end_balance == r.final_balance
        assert r.total_growth > 0


class TestCompoundGrowthSanitization:
    """Invalid inputs are clamped and echoed back."""

    def test_non_finite_and_negative_inputs(self):
        """NaN/negative amounts become 0; non-finite rates become 0."""
        r = compute_compound_growth(CompoundGrowthInputs(
            starting_balance=math.nan,
            monthly_contribution=-100,
            annual_rate_pct=math.inf,
            years=3,
            annual_fee_pct=math.nan,
        ))
        assert r.inputs.starting_balance == 0
        assert r.inputs.monthly_contribution == 0
        assert r.inputs.annual_rate_pct == 0
        assert r.inputs.annual_fee_pct == 0
        assert r.final_balance == 0

    def test_negative_rate_passes_through(self):
        """A finite negative rate is a valid (shrinking) projection."""
        r = compute_compound_growth(growth(starting_balance=1_000, annual_rate_pct=-5, years=1))
        assert r.inputs.annual_rate_pct == -5
        assert r.final_balance < 1_000

    @pytest.mark.parametrize("raw,expected", [(2.5, 3), (2.4, 2), (-3, 0), (math.nan, 0)])
    def test_years_rounded(self, raw, expected):
        """Years round half up to a whole, non-negative number."""
        r = compute_compound_growth(growth(years=raw))
        assert r.inputs.years == expected
        assert len(r.yearly) == expected

    @pytest.mark.parametrize("raw,expected", [(0, 1), (-4, 1), (3.6, 4), (math.nan, 12), (math.inf, 12)])
    def test_periods_per_year_clamped(self, raw, expected):
        """Periods per year is at least 1; non-finite falls back to monthly."""
        r = compute_compound_growth(growth(years=1, periods_per_year=raw))
        assert r.inputs.periods_per_year == expected

    def test_loop_guard_caps_years(self, caplog):
        """Absurd horizons are capped at MAX_TOTAL_PERIODS and logged."""
        with caplog.at_level(logging.WARNING, logger="moneycalc.sdk.growth"):
            r = compute_compound_growth(growth(starting_balance=1, years=1_000_000))
        assert r.inputs.years == MAX_TOTAL_PERIODS // 12
        assert len(r.yearly) == MAX_TOTAL_PERIODS // 12
        assert "capping" in caplog.text

    def test_whole_numbers_echoed_as_ints(self):
        """Sanitized years and periods per year come back as integers."""
        r = compute_compound_growth(growth(years=3.0, periods_per_year=4.0))
        assert r.inputs.years == 3
        assert isinstance(r.inputs.years, int)
        assert r.inputs.periods_per_year == 4
        assert isinstance(r.inputs.periods_per_year, int)


class TestInflationAdjustedGrowth:
    """Nominal vs real (today's pounds) projections."""

    def test_zero_inflation_real_equals_nominal(self):
        """Without inflation, real and nominal match the compound projection."""
        inputs = InflationAdjustedGrowthInputs(starting_balance=10_000, monthly_contribution=200,
                                               annual_return_pct=6, annual_inflation_pct=0, years=15)
        r = compute_inflation_adjusted_growth(inputs)
        compound = compute_compound_growth(growth(starting_balance=10_000, monthly_contribution=200,
                                                  annual_rate_pct=6, years=15))

        assert r.final_balance_real == r.final_balance_nominal
        assert r.final_balance_nominal == pytest.approx(compound.final_balance, rel=1e-12)
        for row in r.yearly:
            assert row.end_balance_real == row.end_balance_nominal

    def test_deflates_by_cumulative_inflation(self):
        """Flat nominal pot loses value at the monthly inflation rate."""
        r = compute_inflation_adjusted_growth(InflationAdjustedGrowthInputs(
            starting_balance=5_000, monthly_contribution=0,
            annual_return_pct=0, annual_inflation_pct=3, years=10,
        ))
        assert r.final_balance_nominal == 5_000
        expected_real = 5_000 / (1 + 0.03 / 12) ** 120
        assert r.final_balance_real == pytest.approx(expected_real, rel=1e-10)

    def test_years_zero(self):
        """No years: both finals are the starting balance, no rows."""
        r = compute_inflation_adjusted_growth(InflationAdjustedGrowthInputs(
            starting_balance=123, monthly_contribution=456,
            annual_return_pct=7, annual_inflation_pct=2, years=0,
        ))
        assert r.final_balance_nominal == 123
        assert r.final_balance_real == 123
        assert r.total_contributed_nominal == 0
        assert r.yearly == ()

    def test_positive_inflation_real_below_nominal(self):
        """Each year the real balance trails the nominal balance."""
        r = compute_inflation_adjusted_growth(InflationAdjustedGrowthInputs(
            starting_balance=1_000, monthly_contribution=100,
            annual_return_pct=5, annual_inflation_pct=2.5, years=5,
        ))
        assert len(r.yearly) == 5
        for row in r.yearly:
            assert isinstance(row, InflationAdjustedGrowthYear)
            assert row.end_balance_real < row.end_balance_nominal
            assert row.total_contributed_nominal == pytest.approx(1_200 * row.year)
        assert r.total_contributed_nominal == pytest.approx(6_000)

    def test_inputs_clamped(self):
        """Negative balances and NaN rates are echoed as zero."""
        r = compute_inflation_adjusted_growth(InflationAdjustedGrowthInputs(
            starting_balance=-10, monthly_contribution=math.inf,
            annual_return_pct=math.nan, annual_inflation_pct=math.nan, years=1.5,
        ))
        assert r.inputs.starting_balance == 0
        assert r.inputs.monthly_contribution == 0
        assert r.inputs.annual_return_pct == 0
        assert r.inputs.annual_inflation_pct == 0
        assert r.inputs.years == 2
        assert isinstance(r.inputs.years, int)

    def test_loop_guard_caps_years(self, caplog):
        """Absurd horizons are capped at MAX_TOTAL_PERIODS months and logged."""
        with caplog.at_level(logging.WARNING, logger="moneycalc.sdk.growth"):
            r = compute_inflation_adjusted_growth(InflationAdjustedGrowthInputs(
                starting_balance=1, monthly_contribution=0,
                annual_return_pct=0, annual_inflation_pct=0, years=1_000_000,
            ))
        assert r.inputs.years == MAX_TOTAL_PERIODS // 12
        assert len(r.yearly) == MAX_TOTAL_PERIODS // 12
        assert r.yearly[-1].year == MAX_TOTAL_PERIODS // 12
        assert "capping" in caplog.text
