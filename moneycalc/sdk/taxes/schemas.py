"""Pydantic schemas for UK tax-year assumptions and take-home results.

TaxAssumptions validates the built-in tax years and any user-supplied
tax-rules/*.yaml file, and provides typed access to the income tax bands and
employee National Insurance thresholds.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

TAX_YEAR_PATTERN = r"^\d{4}-\d{2}$"


class TaxAssumptions(BaseModel):
    """Rate table for a single UK tax year (simplified, rUK bands).

    Income tax band limits are expressed against taxable income (gross minus
    personal allowance). NI thresholds are annualized and apply to gross pay.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_year: str = Field(..., pattern=TAX_YEAR_PATTERN, description="Tax year tag, e.g. '2025-26'")

    personal_allowance: float = Field(..., ge=0, description="Tax-free allowance (annual)")
    basic_rate_limit: float = Field(..., ge=0, description="Upper bound of the basic band (taxable income)")
    higher_rate_limit: float = Field(..., ge=0, description="Upper bound of the higher band (taxable income)")
    basic_rate: float = Field(..., ge=0, le=1)
    higher_rate: float = Field(..., ge=0, le=1)
    additional_rate: float = Field(..., ge=0, le=1)

    # Employee Class 1 NI
    ni_primary_threshold: float = Field(..., ge=0)
    ni_upper_earnings_limit: float = Field(..., ge=0)
    ni_main_rate: float = Field(..., ge=0, le=1)
    ni_upper_rate: float = Field(..., ge=0, le=1)

    @model_validator(mode="after")
    def check_threshold_order(self) -> "TaxAssumptions":
        """Bands must not overlap: allowance <= basic <= higher, PT <= UEL."""
        errors = []

        if self.personal_allowance > self.basic_rate_limit:
            errors.append(
                f"personal_allowance ({self.personal_allowance:.2f}) > "
                f"basic_rate_limit ({self.basic_rate_limit:.2f})"
            )
        if self.basic_rate_limit > self.higher_rate_limit:
            errors.append(
                f"basic_rate_limit ({self.basic_rate_limit:.2f}) > "
                f"higher_rate_limit ({self.higher_rate_limit:.2f})"
            )
        if self.ni_primary_threshold > self.ni_upper_earnings_limit:
            errors.append(
                f"ni_primary_threshold ({self.ni_primary_threshold:.2f}) > "
                f"ni_upper_earnings_limit ({self.ni_upper_earnings_limit:.2f})"
            )

        if errors:
            raise ValueError("; ".join(errors))

        return self


class TakeHomeBreakdown(BaseModel):
    """Annual take-home pay after income tax and employee NI.

    All amounts are rounded to pence.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_year: str = Field(..., description="Tax year of the assumptions used")
    gross_annual: float = Field(..., ge=0)
    taxable_annual: float = Field(..., ge=0, description="Gross minus personal allowance")
    income_tax_annual: float = Field(..., ge=0)
    ni_annual: float = Field(..., ge=0)
    net_annual: float = Field(..., ge=0)
    net_monthly: float = Field(..., ge=0)


class MarginalRates(BaseModel):
    """Marginal deduction rates on the next pound of gross pay."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    income_tax: float
    national_insurance: float

    @property
    def combined(self) -> float:
        """Total marginal deduction rate."""
        return self.income_tax + self.national_insurance
