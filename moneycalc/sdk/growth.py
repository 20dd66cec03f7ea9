"""Compound growth and inflation-adjusted growth projections.

Educational models: constant nominal rate, even compounding each period,
no tax, no volatility, no sequence risk.

The inflation-adjusted projection is the compound projection at monthly
compounding with end-of-month contributions, deflated year by year into
today's pounds.
"""

import logging
import math

from .schemas import (
    CompoundGrowthInputs,
    CompoundGrowthResult,
    CompoundGrowthYear,
    ContributionTiming,
    InflationAdjustedGrowthInputs,
    InflationAdjustedGrowthResult,
    InflationAdjustedGrowthYear,
)
from .validators import (
    clamp_non_negative_finite,
    clamp_to_range,
    finite_or_zero,
    round_half_up,
)

logger = logging.getLogger(__name__)

# Upper bound on simulated periods (e.g. 100 years of daily compounding is
# 36,500). Longer requests are capped, not rejected.
MAX_TOTAL_PERIODS = 120_000

MONTHS_PER_YEAR = 12


def _sanitize_compound_inputs(raw: CompoundGrowthInputs) -> CompoundGrowthInputs:
    """Clamp raw inputs to the domain the simulation runs on."""
    if math.isfinite(raw.periods_per_year):
        periods_per_year = int(clamp_to_range(round_half_up(raw.periods_per_year), 1, MAX_TOTAL_PERIODS))
    else:
        periods_per_year = MONTHS_PER_YEAR

    years = max(0, round_half_up(raw.years))
    max_years = MAX_TOTAL_PERIODS // periods_per_year
    if years > max_years:
        logger.warning(
            f"compound growth: {years} years x {periods_per_year} periods exceeds "
            f"{MAX_TOTAL_PERIODS} periods, capping at {max_years} years"
        )
        years = max_years

    return CompoundGrowthInputs(
        starting_balance=clamp_non_negative_finite(raw.starting_balance),
        monthly_contribution=clamp_non_negative_finite(raw.monthly_contribution),
        annual_rate_pct=finite_or_zero(raw.annual_rate_pct),
        years=years,
        periods_per_year=periods_per_year,
        annual_fee_pct=finite_or_zero(raw.annual_fee_pct),
        contribution_timing=raw.contribution_timing,
    )


def compute_compound_growth(raw: CompoundGrowthInputs) -> CompoundGrowthResult:
    """Simulate a pot period by period with contributions, growth and fees.

    Each period the balance is multiplied by
        (1 + rate/periods_per_year) * (1 - fee/periods_per_year)
    and receives monthly_contribution * 12 / periods_per_year, either before
    (start of period) or after (end of period) that growth.

    Closed form for end-of-period contributions with factor A over n periods:
        FV = P * A**n + PMT * (A**n - 1) / (A - 1)
    Start-of-period multiplies the PMT term by A. With A == 1 the pot grows
    linearly: FV = P + PMT * n.

    Args:
        raw: Unsanitized inputs; invalid values are clamped, never rejected

    Returns:
        CompoundGrowthResult with the sanitized inputs echoed and one
        snapshot per whole year (empty when years rounds to 0)
    """
    inputs = _sanitize_compound_inputs(raw)

    periods_per_year = inputs.periods_per_year
    total_periods = inputs.years * periods_per_year
    contribution_per_period = inputs.monthly_contribution * (MONTHS_PER_YEAR / periods_per_year)
    periodic_rate = (inputs.annual_rate_pct / 100) / periods_per_year
    periodic_fee_rate = (inputs.annual_fee_pct / 100) / periods_per_year
    factor = (1 + periodic_rate) * (1 - periodic_fee_rate)
    start_of_period = inputs.contribution_timing == ContributionTiming.START_OF_PERIOD

    logger.debug(
        f"compound growth: {total_periods} periods, factor={factor:.8f}, "
        f"contribution/period={contribution_per_period:.2f}, timing={inputs.contribution_timing.value}"
    )

    starting_balance = inputs.starting_balance
    balance = starting_balance
    contributed = 0.0
    yearly = []

    for period in range(1, total_periods + 1):
        if start_of_period:
            balance = (balance + contribution_per_period) * factor
        else:
            balance = balance * factor + contribution_per_period
        contributed += contribution_per_period

        if period % periods_per_year == 0:
            yearly.append(CompoundGrowthYear(
                year=period // periods_per_year,
                end_balance=balance,
                total_contributed=contributed,
                total_growth=balance - starting_balance - contributed,
            ))

    return CompoundGrowthResult(
        inputs=inputs,
        final_balance=balance,
        total_contributed=contributed,
        total_growth=balance - starting_balance - contributed,
        yearly=tuple(yearly),
    )


def _deflate(nominal: float, inflation_index: float) -> float:
    """Nominal amount in today's pounds."""
    if inflation_index <= 0:
        return math.inf
    return nominal / inflation_index


def compute_inflation_adjusted_growth(raw: InflationAdjustedGrowthInputs) -> InflationAdjustedGrowthResult:
    """Project a pot in nominal terms and in today's pounds.

    Monthly compounding at annual_return_pct / 12 with end-of-month
    contributions. Inflation accrues monthly at annual_inflation_pct / 12,
    so after m months the price index is (1 + monthly_inflation) ** m and
    real value = nominal / index.

    With zero inflation real equals nominal. With years == 0 both finals are
    the starting balance and there are no yearly rows.
    """
    inputs = InflationAdjustedGrowthInputs(
        starting_balance=clamp_non_negative_finite(raw.starting_balance),
        monthly_contribution=clamp_non_negative_finite(raw.monthly_contribution),
        annual_return_pct=finite_or_zero(raw.annual_return_pct),
        annual_inflation_pct=max(-100.0, finite_or_zero(raw.annual_inflation_pct)),
        years=max(0, round_half_up(raw.years)),
    )

    nominal = compute_compound_growth(CompoundGrowthInputs(
        starting_balance=inputs.starting_balance,
        monthly_contribution=inputs.monthly_contribution,
        annual_rate_pct=inputs.annual_return_pct,
        years=inputs.years,
        periods_per_year=MONTHS_PER_YEAR,
        contribution_timing=ContributionTiming.END_OF_PERIOD,
    ))
    # Echo the year count the simulation actually ran (loop guard may cap it)
    inputs = inputs.model_copy(update={"years": nominal.inputs.years})

    monthly_inflation = (inputs.annual_inflation_pct / 100) / MONTHS_PER_YEAR

    inflation_index = 1.0  # 1 == today
    yearly = []
    for row in nominal.yearly:
        for _ in range(MONTHS_PER_YEAR):
            inflation_index *= 1 + monthly_inflation
        yearly.append(InflationAdjustedGrowthYear(
            year=row.year,
            end_balance_nominal=row.end_balance,
            end_balance_real=_deflate(row.end_balance, inflation_index),
            total_contributed_nominal=row.total_contributed,
        ))

    if yearly:
        final_real = yearly[-1].end_balance_real
    else:
        final_real = inputs.starting_balance

    return InflationAdjustedGrowthResult(
        inputs=inputs,
        final_balance_nominal=nominal.final_balance,
        final_balance_real=final_real,
        total_contributed_nominal=nominal.total_contributed,
        yearly=tuple(yearly),
    )
