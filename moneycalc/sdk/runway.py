"""Emergency fund runway: how long cash lasts at the current net burn."""

import math

from .schemas import EmergencyFundRunwayInputs, EmergencyFundRunwayResult
from .validators import clamp_non_negative_finite

WEEKS_PER_MONTH = 52 / 12


def compute_emergency_fund_runway(raw: EmergencyFundRunwayInputs) -> EmergencyFundRunwayResult:
    """Divide the fund by the monthly net burn (spending minus income).

    No interest, no compounding. Net burn is not floored: zero or negative
    burn means income covers spending and the runway is math.inf.

    Example:
        balance 6000, spending 1500, income 500
        -> net_monthly_burn 1000, runway_months 6, runway_weeks 26
    """
    inputs = EmergencyFundRunwayInputs(
        emergency_fund_balance=clamp_non_negative_finite(raw.emergency_fund_balance),
        monthly_essential_spending=clamp_non_negative_finite(raw.monthly_essential_spending),
        monthly_income_during_emergency=clamp_non_negative_finite(raw.monthly_income_during_emergency),
    )

    net_monthly_burn = inputs.monthly_essential_spending - inputs.monthly_income_during_emergency

    if net_monthly_burn <= 0:
        runway_months = math.inf
    else:
        runway_months = inputs.emergency_fund_balance / net_monthly_burn

    return EmergencyFundRunwayResult(
        inputs=inputs,
        net_monthly_burn=net_monthly_burn,
        runway_months=runway_months,
        runway_weeks=runway_months * WEEKS_PER_MONTH,
    )
