"""Pay rise impact: how much of a gross rise survives tax and NI."""

import logging

from .schemas import PayRiseImpactInput, PayRiseImpactResult
from .taxes import DEFAULT_UK_ASSUMPTIONS, TaxAssumptions, compute_take_home
from .validators import clamp_non_negative_finite, round_money

logger = logging.getLogger(__name__)


def compute_pay_rise_impact(
    raw: PayRiseImpactInput,
    assumptions: TaxAssumptions = DEFAULT_UK_ASSUMPTIONS,
) -> PayRiseImpactResult:
    """Compare take-home at the current and new salary.

    keep_rate is the share of the gross increase kept as net pay. It is only
    meaningful for a rise: when the new salary is equal to or lower than the
    current one, keep_rate is reported as 0 (and effective_deduction_rate as
    1), regardless of the size of the cut.

    Args:
        raw: Current and new gross annual salaries (clamped to >= 0)
        assumptions: Tax-year rate table used for both salaries

    Returns:
        PayRiseImpactResult with both breakdowns and rounded deltas
    """
    current_salary = clamp_non_negative_finite(raw.current_gross_annual_salary)
    new_salary = clamp_non_negative_finite(raw.new_gross_annual_salary)

    current = compute_take_home(current_salary, assumptions)
    next_ = compute_take_home(new_salary, assumptions)

    delta_gross = next_.gross_annual - current.gross_annual
    delta_net = next_.net_annual - current.net_annual

    keep_rate = 0.0 if delta_gross <= 0 else delta_net / delta_gross

    logger.debug(
        f"pay rise {current_salary:.2f} -> {new_salary:.2f}: "
        f"delta_gross={delta_gross:.2f} delta_net={delta_net:.2f} keep_rate={keep_rate:.4f}"
    )

    return PayRiseImpactResult(
        inputs=PayRiseImpactInput(
            current_gross_annual_salary=round_money(current_salary),
            new_gross_annual_salary=round_money(new_salary),
        ),
        current=current,
        next=next_,
        delta_gross_annual=round_money(delta_gross),
        delta_net_annual=round_money(delta_net),
        delta_net_monthly=round_money(delta_net / 12),
        keep_rate=round_money(keep_rate),
        effective_deduction_rate=round_money(1 - keep_rate),
    )
