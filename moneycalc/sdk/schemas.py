"""Pydantic schemas for calculator inputs and results.

All schemas use extra='forbid' so a misspelt field fails loudly, and
frozen=True so a result cannot be changed after it is returned.

Input models deliberately accept any float, including NaN, infinities and
negatives. Calculators sanitize inputs at their entry boundary and echo the
sanitized values back in the result's `inputs` field.
"""

from enum import Enum
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .taxes.schemas import TakeHomeBreakdown


_RECORD_CONFIG = ConfigDict(extra="forbid", frozen=True)


# =============================================================================
# Compound growth
# =============================================================================


class ContributionTiming(str, Enum):
    """When each period's contribution lands relative to that period's growth."""

    START_OF_PERIOD = "startOfPeriod"  # annuity due
    END_OF_PERIOD = "endOfPeriod"  # ordinary annuity


class CompoundGrowthInputs(BaseModel):
    """Inputs for compound growth with regular contributions and fees."""

    model_config = _RECORD_CONFIG

    starting_balance: float = Field(..., description="Current pot value")
    monthly_contribution: float = Field(
        ..., description="Contribution per calendar month, rescaled to the compounding period"
    )
    annual_rate_pct: float = Field(..., description="Nominal annual growth rate, e.g. 5 for 5%")
    years: Union[int, float] = Field(..., description="Years to run (echoed rounded to whole years)")
    periods_per_year: Union[int, float] = Field(
        default=12, description="Compounding periods per year (echoed as a whole number)"
    )
    annual_fee_pct: float = Field(default=0, description="Annual platform/fund fee, e.g. 0.5 for 0.5%")
    contribution_timing: ContributionTiming = Field(default=ContributionTiming.END_OF_PERIOD)


class CompoundGrowthYear(BaseModel):
    """Snapshot at the end of a whole year."""

    model_config = _RECORD_CONFIG

    year: int
    end_balance: float
    total_contributed: float
    total_growth: float = Field(..., description="end_balance - starting_balance - total_contributed")


class CompoundGrowthResult(BaseModel):
    model_config = _RECORD_CONFIG

    inputs: CompoundGrowthInputs = Field(..., description="Sanitized inputs actually used")
    final_balance: float
    total_contributed: float
    total_growth: float
    yearly: Tuple[CompoundGrowthYear, ...] = ()


# =============================================================================
# Inflation-adjusted growth
# =============================================================================


class InflationAdjustedGrowthInputs(BaseModel):
    """Inputs for monthly compounding deflated to today's money."""

    model_config = _RECORD_CONFIG

    starting_balance: float = Field(..., description="Current pot value in today's pounds")
    monthly_contribution: float = Field(..., description="End-of-month contribution (nominal)")
    annual_return_pct: float = Field(..., description="Nominal annual return, e.g. 6 for 6%")
    annual_inflation_pct: float = Field(..., description="Annual inflation, e.g. 2.5 for 2.5%")
    years: Union[int, float] = Field(..., description="Years to run (echoed rounded to whole years)")


class InflationAdjustedGrowthYear(BaseModel):
    model_config = _RECORD_CONFIG

    year: int
    end_balance_nominal: float
    end_balance_real: float = Field(..., description="Nominal balance in today's pounds")
    total_contributed_nominal: float


class InflationAdjustedGrowthResult(BaseModel):
    model_config = _RECORD_CONFIG

    inputs: InflationAdjustedGrowthInputs
    final_balance_nominal: float
    final_balance_real: float
    total_contributed_nominal: float
    yearly: Tuple[InflationAdjustedGrowthYear, ...] = ()


# =============================================================================
# Emergency fund runway
# =============================================================================


class EmergencyFundRunwayInputs(BaseModel):
    model_config = _RECORD_CONFIG

    emergency_fund_balance: float = Field(..., description="Liquid cash available")
    monthly_essential_spending: float = Field(..., description="Spending that must be covered each month")
    monthly_income_during_emergency: float = Field(
        default=0, description="Income still arriving during the emergency"
    )


class EmergencyFundRunwayResult(BaseModel):
    """Runway figures. Runway is math.inf when income covers spending."""

    model_config = _RECORD_CONFIG

    inputs: EmergencyFundRunwayInputs
    net_monthly_burn: float = Field(..., description="Spending minus income; zero or negative means no burn")
    runway_months: float
    runway_weeks: float

    @property
    def is_unbounded(self) -> bool:
        """True if the fund never runs out at the current burn."""
        return self.runway_months == float("inf")


# =============================================================================
# Pay rise impact
# =============================================================================


class PayRiseImpactInput(BaseModel):
    model_config = _RECORD_CONFIG

    current_gross_annual_salary: float
    new_gross_annual_salary: float


class PayRiseImpactResult(BaseModel):
    """Before/after take-home and how much of the gross rise is kept."""

    model_config = _RECORD_CONFIG

    inputs: PayRiseImpactInput
    current: TakeHomeBreakdown
    next: TakeHomeBreakdown

    delta_gross_annual: float
    delta_net_annual: float
    delta_net_monthly: float

    keep_rate: float = Field(..., description="delta_net / delta_gross; 0 unless the salary rises")
    effective_deduction_rate: float = Field(..., description="1 - keep_rate")


# =============================================================================
# Pension contribution impact
# =============================================================================


class PensionScheme(str, Enum):
    """How an employee pension contribution interacts with tax and NI."""

    SALARY_SACRIFICE = "salarySacrifice"
    NET_PAY = "netPay"
    RELIEF_AT_SOURCE = "reliefAtSource"


class PensionContributionInput(BaseModel):
    """Contributions are gross annual amounts.

    Use contribution_from_percent / contribution_from_monthly to convert a
    percentage of salary or a monthly figure first.
    """

    model_config = _RECORD_CONFIG

    gross_annual_salary: float
    employee_gross_annual_contribution: float
    employer_gross_annual_contribution: float = 0


class PensionScenario(BaseModel):
    """Take-home and pension outcome under one pension scheme."""

    model_config = _RECORD_CONFIG

    scheme: PensionScheme
    label: str

    baseline_net_annual: float = Field(..., description="Take-home with no pension contribution")
    net_annual: float
    net_monthly: float

    take_home_change_annual: float = Field(..., description="baseline_net_annual - net_annual")
    take_home_change_monthly: float

    employee_gross_annual_contribution: float
    employer_gross_annual_contribution: float
    total_pension_added_annual: float

    notes: Tuple[str, ...] = ()


class PensionScenarios(BaseModel):
    """One scenario per PensionScheme, no more and no fewer."""

    model_config = _RECORD_CONFIG

    salary_sacrifice: PensionScenario
    net_pay: PensionScenario
    relief_at_source: PensionScenario

    def by_scheme(self, scheme: PensionScheme) -> PensionScenario:
        """Look up the scenario for a scheme."""
        return {
            PensionScheme.SALARY_SACRIFICE: self.salary_sacrifice,
            PensionScheme.NET_PAY: self.net_pay,
            PensionScheme.RELIEF_AT_SOURCE: self.relief_at_source,
        }[scheme]

    def all(self) -> Tuple[PensionScenario, ...]:
        """Scenarios in PensionScheme order."""
        return tuple(self.by_scheme(s) for s in PensionScheme)


class PensionContributionImpactResult(BaseModel):
    model_config = _RECORD_CONFIG

    inputs: PensionContributionInput
    baseline: TakeHomeBreakdown
    scenarios: PensionScenarios
