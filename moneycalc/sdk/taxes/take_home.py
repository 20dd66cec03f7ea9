"""UK income tax and employee National Insurance.

Pure marginal-band arithmetic over a TaxAssumptions rate table. No taper of
the personal allowance, no Scottish bands, no student loans.

Income tax and NI are exposed separately so callers can compute them on a
base other than the literal gross salary (e.g. a net pay pension
arrangement reduces the income tax base but not the NI base).
"""

import logging

from ..validators import clamp_non_negative_finite, round_money
from .rules import DEFAULT_UK_ASSUMPTIONS
from .schemas import MarginalRates, TaxAssumptions, TakeHomeBreakdown

logger = logging.getLogger(__name__)


def compute_income_tax_annual(taxable: float, assumptions: TaxAssumptions) -> float:
    """Income tax on taxable income (gross already reduced by the allowance).

    Band limits are taxable-income thresholds:
        basic:      min(t, basic_rate_limit)
        higher:     min(t, higher_rate_limit) - basic_rate_limit
        additional: t - higher_rate_limit
    Each slice is floored at zero, so income below a band contributes nothing.

    Returns:
        Unrounded annual income tax
    """
    t = clamp_non_negative_finite(taxable)
    a = assumptions

    basic_band = max(0.0, min(t, a.basic_rate_limit))
    higher_band = max(0.0, min(t, a.higher_rate_limit) - a.basic_rate_limit)
    additional_band = max(0.0, t - a.higher_rate_limit)

    return (
        basic_band * a.basic_rate
        + higher_band * a.higher_rate
        + additional_band * a.additional_rate
    )


def compute_ni_annual(gross: float, assumptions: TaxAssumptions) -> float:
    """Employee Class 1 NI on gross pay (annualized thresholds).

    Returns:
        Unrounded annual NI
    """
    g = clamp_non_negative_finite(gross)
    a = assumptions

    main_band = max(0.0, min(g, a.ni_upper_earnings_limit) - a.ni_primary_threshold)
    upper_band = max(0.0, g - a.ni_upper_earnings_limit)

    return main_band * a.ni_main_rate + upper_band * a.ni_upper_rate


def compute_take_home(
    gross_annual_salary: float,
    assumptions: TaxAssumptions = DEFAULT_UK_ASSUMPTIONS,
) -> TakeHomeBreakdown:
    """Compute annual and monthly take-home pay for a gross salary.

    Negative or non-finite salaries are treated as zero. Internal math uses
    full precision; only the returned figures are rounded to pence.

    Args:
        gross_annual_salary: Gross salary per year
        assumptions: Tax-year rate table (default: 2025-26)

    Returns:
        TakeHomeBreakdown

    Example:
        compute_take_home(30000)
        # income_tax_annual=3486.0, ni_annual=1394.4, net_annual=25119.6
    """
    gross = clamp_non_negative_finite(gross_annual_salary)
    taxable = max(0.0, gross - assumptions.personal_allowance)
    income_tax = compute_income_tax_annual(taxable, assumptions)
    ni = compute_ni_annual(gross, assumptions)
    net = max(0.0, gross - income_tax - ni)

    logger.debug(
        f"take-home {assumptions.tax_year}: gross={gross:.2f} taxable={taxable:.2f} "
        f"tax={income_tax:.2f} ni={ni:.2f} net={net:.2f}"
    )

    return TakeHomeBreakdown(
        tax_year=assumptions.tax_year,
        gross_annual=round_money(gross),
        taxable_annual=round_money(taxable),
        income_tax_annual=round_money(income_tax),
        ni_annual=round_money(ni),
        net_annual=round_money(net),
        net_monthly=round_money(net / 12),
    )


def compute_marginal_rates(
    gross_annual_salary: float,
    assumptions: TaxAssumptions = DEFAULT_UK_ASSUMPTIONS,
) -> MarginalRates:
    """Marginal income tax and NI rates on the next pound above a salary.

    A salary sitting exactly on a threshold reports the rate of the band the
    next pound falls into.
    """
    gross = clamp_non_negative_finite(gross_annual_salary)
    a = assumptions

    if gross < a.personal_allowance:
        tax_rate = 0.0
    else:
        taxable = gross - a.personal_allowance
        if taxable < a.basic_rate_limit:
            tax_rate = a.basic_rate
        elif taxable < a.higher_rate_limit:
            tax_rate = a.higher_rate
        else:
            tax_rate = a.additional_rate

    if gross < a.ni_primary_threshold:
        ni_rate = 0.0
    elif gross < a.ni_upper_earnings_limit:
        ni_rate = a.ni_main_rate
    else:
        ni_rate = a.ni_upper_rate

    return MarginalRates(income_tax=tax_rate, national_insurance=ni_rate)
