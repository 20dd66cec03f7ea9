"""Tax-year registry: built-in rate tables plus user tax-rules/*.yaml files.

Built-in years are immutable module constants. A user file at
<config dir>/tax-rules/<tax_year>.yaml adds a year or overrides a built-in
one. Files use the TaxAssumptions field names:

    tax_year: "2027-28"
    personal_allowance: 12570
    basic_rate_limit: 50270
    ...

Lookups always take an explicit tax year; callers decide the default.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Union

import yaml
from pydantic import ValidationError

from ..config import get_tax_rules_dir
from .schemas import TAX_YEAR_PATTERN, TaxAssumptions

logger = logging.getLogger(__name__)


class TaxYearNotFoundError(Exception):
    """Raised when no built-in or user rate table exists for a tax year."""
    pass


class TaxRulesError(Exception):
    """Raised when a tax-rules file cannot be read or fails validation."""
    pass


# Thresholds frozen from 2021-22 through 2027-28; NI main rate 8% since
# April 2024. Band limits are taxable-income figures and NI thresholds are
# aligned to the allowance and the basic band.
UK_2024_25 = TaxAssumptions(
    tax_year="2024-25",
    personal_allowance=12_570,
    basic_rate_limit=50_270,
    higher_rate_limit=125_140,
    basic_rate=0.20,
    higher_rate=0.40,
    additional_rate=0.45,
    ni_primary_threshold=12_570,
    ni_upper_earnings_limit=50_270,
    ni_main_rate=0.08,
    ni_upper_rate=0.02,
)

UK_2025_26 = UK_2024_25.model_copy(update={"tax_year": "2025-26"})

UK_2026_27 = UK_2024_25.model_copy(update={"tax_year": "2026-27"})

BUILTIN_TAX_YEARS: Dict[str, TaxAssumptions] = {
    a.tax_year: a for a in (UK_2024_25, UK_2025_26, UK_2026_27)
}

DEFAULT_TAX_YEAR = "2025-26"
DEFAULT_UK_ASSUMPTIONS = BUILTIN_TAX_YEARS[DEFAULT_TAX_YEAR]


def load_tax_assumptions(path: Union[str, Path]) -> TaxAssumptions:
    """Load and validate a tax-rules YAML file.

    If the file omits tax_year, the file stem is used (2027-28.yaml).

    Raises:
        TaxRulesError: If the file is missing, not a mapping, or invalid
    """
    path = Path(path)
    if not path.exists():
        raise TaxRulesError(f"Tax rules file not found: {path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TaxRulesError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise TaxRulesError(f"Tax rules file must contain a mapping: {path}")

    data.setdefault("tax_year", path.stem)
    # YAML reads an unquoted 2025 as int
    data["tax_year"] = str(data["tax_year"])

    try:
        assumptions = TaxAssumptions.model_validate(data)
    except ValidationError as e:
        raise TaxRulesError(f"Invalid tax rules in {path}:\n{e}") from e

    logger.debug(f"Loaded tax rules for {assumptions.tax_year} from {path}")
    return assumptions


def _user_tax_rules_files() -> Dict[str, Path]:
    """Map tax year -> user YAML file in the config directory.

    Only files named after a tax year (e.g. 2027-28.yaml) count; anything
    else in the directory is ignored.
    """
    rules_dir = get_tax_rules_dir()
    if not rules_dir.is_dir():
        return {}

    files = {}
    for path in sorted(rules_dir.glob("*.yaml")):
        if not re.match(TAX_YEAR_PATTERN, path.stem):
            logger.debug(f"Skipping {path}: file name is not a tax year")
            continue
        files[path.stem] = path
    return files


def list_tax_years() -> List[str]:
    """All available tax years (built-in and user), newest first."""
    years = set(BUILTIN_TAX_YEARS) | set(_user_tax_rules_files())
    return sorted(years, reverse=True)


def get_tax_assumptions(tax_year: str) -> TaxAssumptions:
    """Resolve the rate table for a tax year.

    Resolution order:
    1. <config dir>/tax-rules/<tax_year>.yaml
    2. Built-in table

    Raises:
        TaxYearNotFoundError: If neither source has the year
        TaxRulesError: If the user file is invalid or names another year
    """
    user_file = _user_tax_rules_files().get(tax_year)
    if user_file is not None:
        assumptions = load_tax_assumptions(user_file)
        if assumptions.tax_year != tax_year:
            raise TaxRulesError(
                f"{user_file} declares tax_year '{assumptions.tax_year}', expected '{tax_year}'"
            )
        return assumptions

    if tax_year in BUILTIN_TAX_YEARS:
        return BUILTIN_TAX_YEARS[tax_year]

    available = ", ".join(list_tax_years())
    raise TaxYearNotFoundError(f"No tax rules for '{tax_year}'. Available: {available}")
