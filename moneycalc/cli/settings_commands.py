"""Settings CLI commands for Money Calc.

Manages settings.json - default tax year and other preferences.
"""

import click

from moneycalc.sdk import (
    DEFAULT_TAX_YEAR,
    TaxRulesError,
    TaxYearNotFoundError,
    clear_setting,
    get_config_dir,
    get_setting,
    get_settings_path,
    get_tax_assumptions,
    get_tax_rules_dir,
    load_settings,
    set_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - tax_year: default tax year for calculator commands
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Config directory: {get_config_dir()}")
    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo(f"Tax rules directory: {get_tax_rules_dir()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo(f"Effective tax year: {current.get('tax_year') or DEFAULT_TAX_YEAR}")


@settings.command("tax-year")
@click.argument("year", required=False)
@click.option("--clear", is_flag=True, help="Clear custom tax_year, revert to default")
def settings_tax_year(year, clear):
    """Set or clear the default tax year.

    \b
    Examples:
        money-calc settings tax-year 2026-27
        money-calc settings tax-year --clear
    """
    if clear:
        if clear_setting("tax_year"):
            click.echo("Cleared tax_year setting.")
        else:
            click.echo("tax_year was not set.")
        click.echo(f"Tax year is now: {DEFAULT_TAX_YEAR} (default)")
        return

    if not year:
        current = get_setting("tax_year")
        if current:
            click.echo(f"Current tax_year: {current}")
        else:
            click.echo(f"No custom tax_year set. Using default: {DEFAULT_TAX_YEAR}")
        return

    # Only save a year that resolves to valid rates
    try:
        get_tax_assumptions(year)
    except (TaxYearNotFoundError, TaxRulesError) as e:
        raise click.ClickException(str(e))

    saved_to = set_setting("tax_year", year)
    click.echo(f"Set tax_year: {year}")
    click.echo(f"Saved to: {saved_to}")
