"""Rich renderers for calculator results.

Transforms SDK result records into formatted Rich tables.
"""

import math

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from moneycalc.sdk import (
    CompoundGrowthResult,
    EmergencyFundRunwayResult,
    InflationAdjustedGrowthResult,
    PayRiseImpactResult,
    PensionContributionImpactResult,
    TakeHomeBreakdown,
)


def fmt_gbp(amount: float) -> str:
    """Format pounds with thousands separators; negatives as -£1.00."""
    if amount < 0:
        return f"-£{-amount:,.2f}"
    return f"£{amount:,.2f}"


def fmt_pct(rate: float) -> str:
    """Format a 0..1 rate as a percentage."""
    return f"{rate * 100:.1f}%"


def _key_value_table(rows) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", justify="right")
    for key, value in rows:
        table.add_row(key, value)
    return table


def render_take_home(console: Console, result: TakeHomeBreakdown) -> None:
    """Render a take-home breakdown."""
    table = _key_value_table([
        ("Gross salary", fmt_gbp(result.gross_annual)),
        ("Taxable income", fmt_gbp(result.taxable_annual)),
        ("Income tax", fmt_gbp(result.income_tax_annual)),
        ("National Insurance", fmt_gbp(result.ni_annual)),
        ("Take-home (year)", f"[yellow]{fmt_gbp(result.net_annual)}[/yellow]"),
        ("Take-home (month)", f"[yellow]{fmt_gbp(result.net_monthly)}[/yellow]"),
    ])
    console.print(Panel(table, title=f"Take-home pay ({result.tax_year})", border_style="dim"))


def render_compound_growth(console: Console, result: CompoundGrowthResult) -> None:
    """Render a compound growth projection with one row per year."""
    inputs = result.inputs
    console.print(
        f"\n[bold]Compound growth[/bold]: {inputs.years} years, "
        f"{inputs.annual_rate_pct:g}% growth, {inputs.annual_fee_pct:g}% fees, "
        f"{inputs.periods_per_year} periods/year, "
        f"contributions at {inputs.contribution_timing.value}"
    )

    table = Table(expand=True, box=box.SIMPLE)
    table.add_column("Year", style="cyan")
    table.add_column("Balance", justify="right", style="yellow")
    table.add_column("Contributed", justify="right", style="green")
    table.add_column("Growth", justify="right")

    for row in result.yearly:
        table.add_row(
            str(row.year),
            fmt_gbp(row.end_balance),
            fmt_gbp(row.total_contributed),
            fmt_gbp(row.total_growth),
        )

    table.add_section()
    table.add_row(
        "[bold]Final[/bold]",
        f"[bold]{fmt_gbp(result.final_balance)}[/bold]",
        f"[bold]{fmt_gbp(result.total_contributed)}[/bold]",
        f"[bold]{fmt_gbp(result.total_growth)}[/bold]",
    )
    console.print(table)


def render_inflation_adjusted_growth(console: Console, result: InflationAdjustedGrowthResult) -> None:
    """Render nominal and real (today's pounds) balances per year."""
    inputs = result.inputs
    console.print(
        f"\n[bold]Inflation-adjusted growth[/bold]: {inputs.years} years, "
        f"{inputs.annual_return_pct:g}% return, {inputs.annual_inflation_pct:g}% inflation"
    )

    table = Table(expand=True, box=box.SIMPLE)
    table.add_column("Year", style="cyan")
    table.add_column("Nominal", justify="right")
    table.add_column("Today's £", justify="right", style="yellow")
    table.add_column("Contributed", justify="right", style="green")

    for row in result.yearly:
        table.add_row(
            str(row.year),
            fmt_gbp(row.end_balance_nominal),
            fmt_gbp(row.end_balance_real),
            fmt_gbp(row.total_contributed_nominal),
        )

    table.add_section()
    table.add_row(
        "[bold]Final[/bold]",
        f"[bold]{fmt_gbp(result.final_balance_nominal)}[/bold]",
        f"[bold]{fmt_gbp(result.final_balance_real)}[/bold]",
        f"[bold]{fmt_gbp(result.total_contributed_nominal)}[/bold]",
    )
    console.print(table)


def render_emergency_fund_runway(console: Console, result: EmergencyFundRunwayResult) -> None:
    """Render runway figures; unbounded runway shows as 'unlimited'."""
    if math.isinf(result.runway_months):
        months = weeks = "unlimited"
    else:
        months = f"{result.runway_months:.1f}"
        weeks = f"{result.runway_weeks:.1f}"

    table = _key_value_table([
        ("Emergency fund", fmt_gbp(result.inputs.emergency_fund_balance)),
        ("Essential spending / month", fmt_gbp(result.inputs.monthly_essential_spending)),
        ("Income / month", fmt_gbp(result.inputs.monthly_income_during_emergency)),
        ("Net burn / month", fmt_gbp(result.net_monthly_burn)),
        ("Runway (months)", f"[yellow]{months}[/yellow]"),
        ("Runway (weeks)", f"[yellow]{weeks}[/yellow]"),
    ])
    console.print(Panel(table, title="Emergency fund runway", border_style="dim"))

    if result.is_unbounded:
        console.print("[green]Income covers essential spending; the fund is not drawn down.[/green]")


def render_pay_rise_impact(console: Console, result: PayRiseImpactResult, marginal_rate: float) -> None:
    """Render current vs new take-home side by side."""
    table = Table(title=f"Pay rise impact ({result.current.tax_year})", box=box.SIMPLE)
    table.add_column("", style="dim")
    table.add_column("Current", justify="right")
    table.add_column("New", justify="right")
    table.add_column("Change", justify="right", style="yellow")

    for label, field in (
        ("Gross", "gross_annual"),
        ("Income tax", "income_tax_annual"),
        ("National Insurance", "ni_annual"),
        ("Take-home (year)", "net_annual"),
        ("Take-home (month)", "net_monthly"),
    ):
        before = getattr(result.current, field)
        after = getattr(result.next, field)
        table.add_row(label, fmt_gbp(before), fmt_gbp(after), fmt_gbp(after - before))

    console.print(table)
    console.print(
        f"You keep [bold]{fmt_pct(result.keep_rate)}[/bold] of the rise "
        f"(deductions {fmt_pct(result.effective_deduction_rate)}). "
        f"Marginal deduction rate at the new salary: {fmt_pct(marginal_rate)}."
    )


def render_pension_impact(console: Console, result: PensionContributionImpactResult) -> None:
    """Render one row per pension scheme, then the caveats."""
    inputs = result.inputs
    console.print(
        f"\n[bold]Pension contribution impact[/bold] ({result.baseline.tax_year}): "
        f"salary {fmt_gbp(inputs.gross_annual_salary)}, "
        f"employee {fmt_gbp(inputs.employee_gross_annual_contribution)}/yr, "
        f"employer {fmt_gbp(inputs.employer_gross_annual_contribution)}/yr"
    )
    console.print(f"Baseline take-home (no pension): {fmt_gbp(result.baseline.net_monthly)}/month")

    table = Table(expand=True, box=box.SIMPLE)
    table.add_column("Scheme", style="cyan")
    table.add_column("Take-home / month", justify="right")
    table.add_column("Cost / month", justify="right", style="yellow")
    table.add_column("Cost / year", justify="right", style="yellow")
    table.add_column("Added to pension / year", justify="right", style="green")

    for scenario in result.scenarios.all():
        table.add_row(
            scenario.label,
            fmt_gbp(scenario.net_monthly),
            fmt_gbp(scenario.take_home_change_monthly),
            fmt_gbp(scenario.take_home_change_annual),
            fmt_gbp(scenario.total_pension_added_annual),
        )
    console.print(table)

    for scenario in result.scenarios.all():
        console.print(f"[dim]{scenario.label}:[/dim]")
        for note in scenario.notes:
            console.print(f"[dim]  - {note}[/dim]")
