"""Pension contribution impact under the three UK relief mechanisms.

For the same gross employee contribution, compares take-home pay under:

- Salary sacrifice: salary is reduced before tax and NI
- Net pay arrangement: contribution is deducted before income tax, after NI
- Relief at source: paid from net pay, provider adds basic-rate relief

Scope:
- Employee contribution capped at salary; employer contribution uncapped
- Higher/additional-rate reclaim under relief at source is not modelled
- Employer NI savings passed on under salary sacrifice are not modelled

Salary sacrifice never costs more take-home than net pay for the same
contribution, since it also removes the contribution from NI-able pay.
"""

import logging
from typing import Tuple

from .schemas import (
    PensionContributionImpactResult,
    PensionContributionInput,
    PensionScenario,
    PensionScenarios,
    PensionScheme,
)
from .taxes import (
    DEFAULT_UK_ASSUMPTIONS,
    TaxAssumptions,
    TakeHomeBreakdown,
    compute_income_tax_annual,
    compute_ni_annual,
    compute_take_home,
)
from .validators import clamp_non_negative_finite, clamp_to_range, round_money

logger = logging.getLogger(__name__)

# Share of a gross relief-at-source contribution paid from take-home pay;
# the provider claims the remaining 20% basic-rate relief.
RELIEF_AT_SOURCE_NET_SHARE = 0.8

SCHEME_LABELS = {
    PensionScheme.SALARY_SACRIFICE: "Salary sacrifice (if your employer offers it)",
    PensionScheme.NET_PAY: "Net pay arrangement (most workplace pensions)",
    PensionScheme.RELIEF_AT_SOURCE: "Relief at source (personal pensions, SIPPs)",
}

SCHEME_NOTES = {
    PensionScheme.SALARY_SACRIFICE: (
        "Your contractual salary falls, so both income tax and employee NI fall.",
        "Employers sometimes add their own NI saving to your pot; not included.",
    ),
    PensionScheme.NET_PAY: (
        "Deducted before income tax, so you get full relief at your marginal rate.",
        "Employee NI is still charged on the full salary in this model.",
    ),
    PensionScheme.RELIEF_AT_SOURCE: (
        "You pay 80% of the gross contribution from take-home pay; the provider "
        "claims the 20% basic-rate relief.",
        "Higher and additional rate taxpayers can reclaim more through self "
        "assessment; not modelled.",
    ),
}


def contribution_from_percent(gross_annual_salary: float, percent: float) -> float:
    """Gross annual contribution for a percentage of salary (5 means 5%)."""
    salary = clamp_non_negative_finite(gross_annual_salary)
    return salary * clamp_non_negative_finite(percent) / 100


def contribution_from_monthly(monthly_amount: float) -> float:
    """Gross annual contribution for a fixed monthly amount."""
    return clamp_non_negative_finite(monthly_amount) * 12


def _scenario(
    scheme: PensionScheme,
    baseline: TakeHomeBreakdown,
    net_annual: float,
    contributions: Tuple[float, float],
) -> PensionScenario:
    """Build a scenario record; take-home change is always baseline - net."""
    employee, employer = contributions
    change = baseline.net_annual - net_annual

    return PensionScenario(
        scheme=scheme,
        label=SCHEME_LABELS[scheme],
        baseline_net_annual=baseline.net_annual,
        net_annual=round_money(net_annual),
        net_monthly=round_money(net_annual / 12),
        take_home_change_annual=round_money(change),
        take_home_change_monthly=round_money(change / 12),
        employee_gross_annual_contribution=round_money(employee),
        employer_gross_annual_contribution=round_money(employer),
        total_pension_added_annual=round_money(employee + employer),
        notes=SCHEME_NOTES[scheme],
    )


def compute_pension_contribution_impact(
    raw: PensionContributionInput,
    assumptions: TaxAssumptions = DEFAULT_UK_ASSUMPTIONS,
) -> PensionContributionImpactResult:
    """Compare take-home pay under salary sacrifice, net pay and relief at source.

    Args:
        raw: Salary and gross annual contributions. The employee contribution
            is clamped to [0, salary]; the employer contribution to >= 0.
        assumptions: Tax-year rate table

    Returns:
        PensionContributionImpactResult with the no-pension baseline and one
        scenario per PensionScheme

    Example:
        compute_pension_contribution_impact(PensionContributionInput(
            gross_annual_salary=40000,
            employee_gross_annual_contribution=1200,
        ))
        # scenarios.relief_at_source.take_home_change_annual == 960.0
    """
    salary = clamp_non_negative_finite(raw.gross_annual_salary)
    employee = clamp_to_range(raw.employee_gross_annual_contribution, 0.0, salary)
    employer = clamp_non_negative_finite(raw.employer_gross_annual_contribution)
    contributions = (employee, employer)

    baseline = compute_take_home(salary, assumptions)

    # Salary sacrifice: take-home on the reduced salary
    sacrificed = compute_take_home(max(0.0, salary - employee), assumptions)
    salary_sacrifice = _scenario(
        PensionScheme.SALARY_SACRIFICE, baseline, sacrificed.net_annual, contributions,
    )

    # Net pay: income tax on (salary - contribution - allowance), NI on full salary
    taxable_net_pay = max(0.0, salary - employee - assumptions.personal_allowance)
    tax_net_pay = compute_income_tax_annual(taxable_net_pay, assumptions)
    ni_net_pay = compute_ni_annual(salary, assumptions)
    net_pay_net = max(0.0, salary - tax_net_pay - ni_net_pay - employee)
    net_pay = _scenario(PensionScheme.NET_PAY, baseline, net_pay_net, contributions)

    # Relief at source: 80% of the gross contribution comes out of take-home
    employee_net_paid = round_money(employee * RELIEF_AT_SOURCE_NET_SHARE)
    relief_at_source_net = max(0.0, baseline.net_annual - employee_net_paid)
    relief_at_source = _scenario(
        PensionScheme.RELIEF_AT_SOURCE, baseline, relief_at_source_net, contributions,
    )

    logger.debug(
        f"pension {assumptions.tax_year}: salary={salary:.2f} employee={employee:.2f} "
        f"employer={employer:.2f} costs ss={salary_sacrifice.take_home_change_annual:.2f} "
        f"np={net_pay.take_home_change_annual:.2f} ras={relief_at_source.take_home_change_annual:.2f}"
    )

    return PensionContributionImpactResult(
        inputs=PensionContributionInput(
            gross_annual_salary=round_money(salary),
            employee_gross_annual_contribution=round_money(employee),
            employer_gross_annual_contribution=round_money(employer),
        ),
        baseline=baseline,
        scenarios=PensionScenarios(
            salary_sacrifice=salary_sacrifice,
            net_pay=net_pay,
            relief_at_source=relief_at_source,
        ),
    )
