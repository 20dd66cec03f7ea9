"""Money Calc CLI - UK take-home, savings growth and pension estimates."""

import logging
import os

import click

from moneycalc import __version__

from .calc_commands import (
    compound_growth,
    emergency_runway,
    inflation_growth,
    pay_rise,
    pension,
    take_home,
    tax_years,
)
from .settings_commands import settings as settings_group


def configure_logging() -> None:
    """Configure logging based on LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.version_option(version=__version__, prog_name="money-calc")
def cli():
    """Money Calc - Rough UK personal finance estimates.

    Simplified single-tax-year rules: no allowance taper, no Scottish
    bands, no student loans. Figures are estimates, not advice.

    Configuration is loaded from (in order):

    \b
    1. MONEY_CALC_CONFIG_PATH environment variable
    2. ~/.config/money-calc/ (XDG default)

    Run 'money-calc settings show' to see the effective tax year.
    """
    pass


# Calculators
cli.add_command(take_home)
cli.add_command(compound_growth)
cli.add_command(inflation_growth)
cli.add_command(emergency_runway)
cli.add_command(pay_rise)
cli.add_command(pension)
cli.add_command(tax_years)

# Subcommand groups
cli.add_command(settings_group)


def main():
    """Entry point for the CLI."""
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
