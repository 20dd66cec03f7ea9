"""Money Calc SDK - Pure UK personal finance calculations.

Every calculator is a pure function from an input record to a frozen result
record. Invalid numeric inputs are clamped, never rejected.
"""

from .config import (
    get_config_dir,
    get_settings_path,
    get_tax_rules_dir,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
)

from .taxes import (
    TaxAssumptions,
    TakeHomeBreakdown,
    MarginalRates,
    BUILTIN_TAX_YEARS,
    DEFAULT_TAX_YEAR,
    DEFAULT_UK_ASSUMPTIONS,
    TaxRulesError,
    TaxYearNotFoundError,
    get_tax_assumptions,
    list_tax_years,
    load_tax_assumptions,
    compute_income_tax_annual,
    compute_ni_annual,
    compute_marginal_rates,
    compute_take_home,
)

from .schemas import (
    ContributionTiming,
    CompoundGrowthInputs,
    CompoundGrowthYear,
    CompoundGrowthResult,
    InflationAdjustedGrowthInputs,
    InflationAdjustedGrowthYear,
    InflationAdjustedGrowthResult,
    EmergencyFundRunwayInputs,
    EmergencyFundRunwayResult,
    PayRiseImpactInput,
    PayRiseImpactResult,
    PensionScheme,
    PensionContributionInput,
    PensionScenario,
    PensionScenarios,
    PensionContributionImpactResult,
)

from .growth import (
    compute_compound_growth,
    compute_inflation_adjusted_growth,
    MAX_TOTAL_PERIODS,
)

from .runway import compute_emergency_fund_runway

from .pay_rise import compute_pay_rise_impact

from .pension import (
    compute_pension_contribution_impact,
    contribution_from_percent,
    contribution_from_monthly,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "get_tax_rules_dir",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    # Tax / NI
    "TaxAssumptions",
    "TakeHomeBreakdown",
    "MarginalRates",
    "BUILTIN_TAX_YEARS",
    "DEFAULT_TAX_YEAR",
    "DEFAULT_UK_ASSUMPTIONS",
    "TaxRulesError",
    "TaxYearNotFoundError",
    "get_tax_assumptions",
    "list_tax_years",
    "load_tax_assumptions",
    "compute_income_tax_annual",
    "compute_ni_annual",
    "compute_marginal_rates",
    "compute_take_home",
    # Records
    "ContributionTiming",
    "CompoundGrowthInputs",
    "CompoundGrowthYear",
    "CompoundGrowthResult",
    "InflationAdjustedGrowthInputs",
    "InflationAdjustedGrowthYear",
    "InflationAdjustedGrowthResult",
    "EmergencyFundRunwayInputs",
    "EmergencyFundRunwayResult",
    "PayRiseImpactInput",
    "PayRiseImpactResult",
    "PensionScheme",
    "PensionContributionInput",
    "PensionScenario",
    "PensionScenarios",
    "PensionContributionImpactResult",
    # Growth
    "compute_compound_growth",
    "compute_inflation_adjusted_growth",
    "MAX_TOTAL_PERIODS",
    # Emergency fund
    "compute_emergency_fund_runway",
    # Pay rise
    "compute_pay_rise_impact",
    # Pension
    "compute_pension_contribution_impact",
    "contribution_from_percent",
    "contribution_from_monthly",
]
