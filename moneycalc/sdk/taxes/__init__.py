"""taxes - UK income tax and National Insurance.

Scope:
- Tax-year rate tables (built-in and tax-rules/*.yaml)
- Income tax over three marginal bands of taxable income
- Employee Class 1 NI over two bands of gross pay
- Take-home pay breakdown

Constraints:
- Pure calculation - assumptions are always passed in, never read globally
- No error conditions for numeric input - invalid salaries count as zero

Modules:
- schemas: TaxAssumptions, TakeHomeBreakdown
- rules: Built-in tax years and user tax-rules lookup
- take_home: Income tax, NI and take-home calculations

Usage:
    from moneycalc.sdk.taxes import compute_take_home, get_tax_assumptions

    breakdown = compute_take_home(30000)
    breakdown = compute_take_home(30000, get_tax_assumptions("2026-27"))
"""

from .schemas import MarginalRates, TaxAssumptions, TakeHomeBreakdown

from .rules import (
    BUILTIN_TAX_YEARS,
    DEFAULT_TAX_YEAR,
    DEFAULT_UK_ASSUMPTIONS,
    UK_2024_25,
    UK_2025_26,
    UK_2026_27,
    TaxRulesError,
    TaxYearNotFoundError,
    get_tax_assumptions,
    list_tax_years,
    load_tax_assumptions,
)

from .take_home import (
    compute_income_tax_annual,
    compute_marginal_rates,
    compute_ni_annual,
    compute_take_home,
)

__all__ = [
    # Schemas
    "MarginalRates",
    "TaxAssumptions",
    "TakeHomeBreakdown",
    # Rules
    "BUILTIN_TAX_YEARS",
    "DEFAULT_TAX_YEAR",
    "DEFAULT_UK_ASSUMPTIONS",
    "UK_2024_25",
    "UK_2025_26",
    "UK_2026_27",
    "TaxRulesError",
    "TaxYearNotFoundError",
    "get_tax_assumptions",
    "list_tax_years",
    "load_tax_assumptions",
    # Calculations
    "compute_income_tax_annual",
    "compute_marginal_rates",
    "compute_ni_annual",
    "compute_take_home",
]
