"""Calculator commands: one command per SDK calculator."""

import json

import click
from rich.console import Console
from rich.table import Table

from moneycalc.sdk import (
    DEFAULT_TAX_YEAR,
    BUILTIN_TAX_YEARS,
    CompoundGrowthInputs,
    ContributionTiming,
    EmergencyFundRunwayInputs,
    InflationAdjustedGrowthInputs,
    PayRiseImpactInput,
    PensionContributionInput,
    TaxAssumptions,
    TaxRulesError,
    TaxYearNotFoundError,
    compute_compound_growth,
    compute_emergency_fund_runway,
    compute_inflation_adjusted_growth,
    compute_marginal_rates,
    compute_pay_rise_impact,
    compute_pension_contribution_impact,
    compute_take_home,
    contribution_from_monthly,
    contribution_from_percent,
    get_setting,
    get_tax_assumptions,
    list_tax_years,
)
from .renderers.result_renderer import (
    fmt_gbp,
    fmt_pct,
    render_compound_growth,
    render_emergency_fund_runway,
    render_inflation_adjusted_growth,
    render_pay_rise_impact,
    render_pension_impact,
    render_take_home,
)


format_option = click.option(
    "--format", "output_format", type=click.Choice(["table", "json"]), default="table",
    help="Output format (default: table)",
)

tax_year_option = click.option(
    "--tax-year", help="Tax year, e.g. 2025-26 (default: settings tax_year, else built-in default)",
)


def resolve_assumptions(tax_year: str = None) -> TaxAssumptions:
    """Resolve rates for --tax-year, falling back to settings then the default."""
    year = tax_year or get_setting("tax_year") or DEFAULT_TAX_YEAR
    try:
        return get_tax_assumptions(year)
    except (TaxYearNotFoundError, TaxRulesError) as e:
        raise click.ClickException(str(e))


def echo_json(result) -> None:
    """Print a result record as JSON (unbounded runway prints as Infinity)."""
    click.echo(json.dumps(result.model_dump(), indent=2, default=str))


@click.command("take-home")
@click.argument("salary", type=float)
@tax_year_option
@format_option
def take_home(salary: float, tax_year: str, output_format: str):
    """Estimate take-home pay for a gross annual SALARY.

    \b
    Examples:
      money-calc take-home 30000
      money-calc take-home 85000 --tax-year 2026-27 --format json
    """
    result = compute_take_home(salary, resolve_assumptions(tax_year))

    if output_format == "json":
        echo_json(result)
        return

    render_take_home(Console(width=100), result)


@click.command("compound-growth")
@click.option("--start", "starting_balance", type=float, default=0, show_default=True,
              help="Current pot value")
@click.option("--monthly", "monthly_contribution", type=float, default=0, show_default=True,
              help="Contribution per month")
@click.option("--rate", "annual_rate_pct", type=float, required=True, help="Annual growth %, e.g. 5")
@click.option("--years", type=float, required=True, help="Whole years to project")
@click.option("--periods-per-year", type=float, default=12, show_default=True,
              help="Compounding periods per year (1 = annual, 12 = monthly)")
@click.option("--fee", "annual_fee_pct", type=float, default=0, show_default=True,
              help="Annual platform/fund fee %, e.g. 0.5")
@click.option("--timing", type=click.Choice(["start", "end"]), default="end", show_default=True,
              help="Contribution at the start or end of each period")
@format_option
def compound_growth(starting_balance, monthly_contribution, annual_rate_pct, years,
                    periods_per_year, annual_fee_pct, timing, output_format):
    """Project a pot with regular contributions, growth and fees.

    \b
    Examples:
      money-calc compound-growth --start 5000 --monthly 250 --rate 6 --years 10
      money-calc compound-growth --monthly 100 --rate 5 --years 20 --fee 0.5 --timing start
    """
    result = compute_compound_growth(CompoundGrowthInputs(
        starting_balance=starting_balance,
        monthly_contribution=monthly_contribution,
        annual_rate_pct=annual_rate_pct,
        years=years,
        periods_per_year=periods_per_year,
        annual_fee_pct=annual_fee_pct,
        contribution_timing=(
            ContributionTiming.START_OF_PERIOD if timing == "start"
            else ContributionTiming.END_OF_PERIOD
        ),
    ))

    if output_format == "json":
        echo_json(result)
        return

    render_compound_growth(Console(width=100), result)


@click.command("inflation-growth")
@click.option("--start", "starting_balance", type=float, default=0, show_default=True,
              help="Current pot value in today's pounds")
@click.option("--monthly", "monthly_contribution", type=float, default=0, show_default=True,
              help="Contribution per month")
@click.option("--return", "annual_return_pct", type=float, required=True, help="Annual return %, e.g. 6")
@click.option("--inflation", "annual_inflation_pct", type=float, required=True,
              help="Annual inflation %, e.g. 2.5")
@click.option("--years", type=float, required=True, help="Whole years to project")
@format_option
def inflation_growth(starting_balance, monthly_contribution, annual_return_pct,
                     annual_inflation_pct, years, output_format):
    """Project a pot and show its value in today's pounds.

    \b
    Examples:
      money-calc inflation-growth --start 10000 --monthly 200 --return 6 --inflation 2.5 --years 15
    """
    result = compute_inflation_adjusted_growth(InflationAdjustedGrowthInputs(
        starting_balance=starting_balance,
        monthly_contribution=monthly_contribution,
        annual_return_pct=annual_return_pct,
        annual_inflation_pct=annual_inflation_pct,
        years=years,
    ))

    if output_format == "json":
        echo_json(result)
        return

    render_inflation_adjusted_growth(Console(width=100), result)


@click.command("emergency-runway")
@click.option("--balance", type=float, required=True, help="Emergency fund cash")
@click.option("--spending", type=float, required=True, help="Essential spending per month")
@click.option("--income", type=float, default=0, show_default=True,
              help="Income per month during the emergency")
@format_option
def emergency_runway(balance: float, spending: float, income: float, output_format: str):
    """Estimate how long an emergency fund lasts.

    \b
    Examples:
      money-calc emergency-runway --balance 6000 --spending 1500 --income 500
    """
    result = compute_emergency_fund_runway(EmergencyFundRunwayInputs(
        emergency_fund_balance=balance,
        monthly_essential_spending=spending,
        monthly_income_during_emergency=income,
    ))

    if output_format == "json":
        echo_json(result)
        return

    render_emergency_fund_runway(Console(width=100), result)


@click.command("pay-rise")
@click.argument("current", type=float)
@click.argument("new", type=float)
@tax_year_option
@format_option
def pay_rise(current: float, new: float, tax_year: str, output_format: str):
    """Show how much of a rise from CURRENT to NEW salary reaches take-home pay.

    \b
    Examples:
      money-calc pay-rise 50000 55000
    """
    assumptions = resolve_assumptions(tax_year)
    result = compute_pay_rise_impact(
        PayRiseImpactInput(current_gross_annual_salary=current, new_gross_annual_salary=new),
        assumptions,
    )

    if output_format == "json":
        echo_json(result)
        return

    marginal = compute_marginal_rates(result.inputs.new_gross_annual_salary, assumptions)
    render_pay_rise_impact(Console(width=100), result, marginal.combined)


@click.command("pension")
@click.argument("salary", type=float)
@click.option("--employee-pct", type=float, help="Employee contribution as % of salary")
@click.option("--employee-monthly", type=float, help="Employee contribution in £ per month")
@click.option("--employee-annual", type=float, help="Employee contribution in £ per year")
@click.option("--employer-pct", type=float, help="Employer contribution as % of salary")
@click.option("--employer-annual", type=float, help="Employer contribution in £ per year")
@tax_year_option
@format_option
def pension(salary, employee_pct, employee_monthly, employee_annual,
            employer_pct, employer_annual, tax_year, output_format):
    """Compare take-home cost of a pension contribution across schemes.

    Give the employee contribution exactly one way: --employee-pct,
    --employee-monthly or --employee-annual.

    \b
    Examples:
      money-calc pension 60000 --employee-pct 5 --employer-pct 3
      money-calc pension 40000 --employee-monthly 100
    """
    given = [v for v in (employee_pct, employee_monthly, employee_annual) if v is not None]
    if len(given) != 1:
        raise click.BadParameter(
            "Give exactly one of --employee-pct, --employee-monthly, --employee-annual.",
            param_hint="employee contribution",
        )
    if employer_pct is not None and employer_annual is not None:
        raise click.BadParameter(
            "Give at most one of --employer-pct, --employer-annual.",
            param_hint="employer contribution",
        )

    if employee_pct is not None:
        employee = contribution_from_percent(salary, employee_pct)
    elif employee_monthly is not None:
        employee = contribution_from_monthly(employee_monthly)
    else:
        employee = employee_annual

    if employer_pct is not None:
        employer = contribution_from_percent(salary, employer_pct)
    else:
        employer = employer_annual or 0

    result = compute_pension_contribution_impact(
        PensionContributionInput(
            gross_annual_salary=salary,
            employee_gross_annual_contribution=employee,
            employer_gross_annual_contribution=employer,
        ),
        resolve_assumptions(tax_year),
    )

    if output_format == "json":
        echo_json(result)
        return

    render_pension_impact(Console(width=120), result)


@click.command("tax-years")
@format_option
def tax_years(output_format: str):
    """List available tax years and their main thresholds."""
    rows = []
    for year in list_tax_years():
        source = "built-in" if year in BUILTIN_TAX_YEARS else "user"
        try:
            a = get_tax_assumptions(year)
        except TaxRulesError as e:
            raise click.ClickException(str(e))
        if year in BUILTIN_TAX_YEARS and a is not BUILTIN_TAX_YEARS[year]:
            source = "user (overrides built-in)"
        rows.append((source, a))

    if output_format == "json":
        output = [{"source": source, **a.model_dump()} for source, a in rows]
        click.echo(json.dumps(output, indent=2))
        return

    table = Table(title="Tax years")
    table.add_column("Year", style="cyan")
    table.add_column("Source", style="dim")
    table.add_column("Allowance", justify="right")
    table.add_column("Basic band", justify="right")
    table.add_column("Rates", justify="right")
    table.add_column("NI", justify="right")

    default_year = get_setting("tax_year") or DEFAULT_TAX_YEAR
    for source, a in rows:
        marker = " *" if a.tax_year == default_year else ""
        table.add_row(
            f"{a.tax_year}{marker}",
            source,
            fmt_gbp(a.personal_allowance),
            fmt_gbp(a.basic_rate_limit),
            f"{fmt_pct(a.basic_rate)} / {fmt_pct(a.higher_rate)} / {fmt_pct(a.additional_rate)}",
            f"{fmt_pct(a.ni_main_rate)} / {fmt_pct(a.ni_upper_rate)}",
        )

    console = Console(width=100)
    console.print(table)
    console.print("[dim]* default tax year[/dim]")
