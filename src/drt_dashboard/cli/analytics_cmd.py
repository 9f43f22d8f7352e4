"""Analytics backend CLI commands."""

import asyncio
from typing import TYPE_CHECKING

import typer

if TYPE_CHECKING:
    from drt_dashboard.lib.analytics import AnalyticsClient

analytics_app = typer.Typer()


@analytics_app.command("district")
def district(
    name: str = typer.Argument(..., help="District display name, e.g. 강남구"),
    month: str | None = typer.Option(None, "--month", help="Analysis month (YYYY-MM)"),
) -> None:
    """Show the traffic headline for a district, as the map popup does."""
    asyncio.run(_district(name, month))


@analytics_app.command("summary")
def summary(
    district: str | None = typer.Option(None, "--district", help="District identifier or name (city-wide if omitted)"),
    month: str | None = typer.Option(None, "--month", help="Analysis month (YYYY-MM)"),
) -> None:
    """Show the dashboard summary cards."""
    asyncio.run(_summary(district, month))


@analytics_app.command("drt-rankings")
def drt_rankings(
    district: str | None = typer.Option(None, "--district", help="District identifier or name"),
    month: str | None = typer.Option(None, "--month", help="Analysis month (YYYY-MM)"),
    model_type: str = typer.Option("commuter", "--model", help="DRT model: commuter, tourism or vulnerable"),
) -> None:
    """List the top DRT stations of a district."""
    asyncio.run(_drt_rankings(district, month, model_type))


def _client() -> "AnalyticsClient":
    """Build an analytics client from the current settings."""
    from drt_dashboard.core.config import get_settings
    from drt_dashboard.lib.analytics import AnalyticsClient

    return AnalyticsClient.from_settings(get_settings())


async def _district(name: str, month: str | None) -> None:
    """Async implementation of the district popup query."""
    from drt_dashboard.lib.analytics import AnalyticsApiError
    from drt_dashboard.services.district_map_service import select_district

    try:
        selection = await select_district(_client(), name, month)
    except (AnalyticsApiError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"{selection.district_name} ({selection.district_id})")
    typer.echo(f"  Total passengers: {selection.total_passengers:,}")
    typer.echo(f"  Peak hour:        {selection.peak_hour:02d}:00")


async def _summary(district: str | None, month: str | None) -> None:
    """Async implementation of the dashboard summary."""
    from drt_dashboard.lib.analytics import AnalyticsApiError
    from drt_dashboard.services.dashboard_service import get_dashboard_summary

    try:
        result = await get_dashboard_summary(_client(), district, month)
    except (AnalyticsApiError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"Summary: {result.top_district}")
    typer.echo(f"  Total passengers:      {result.total_passengers:,}")
    typer.echo(f"  Daily average:         {result.daily_average:,}")
    typer.echo(f"  Peak hour traffic:     {result.peak_hour_traffic:,.1f}")
    typer.echo(f"  Weekday/weekend ratio: {result.weekday_weekend_ratio:.2f}")


async def _drt_rankings(district: str | None, month: str | None, model_type: str) -> None:
    """Async implementation of the DRT station ranking."""
    from drt_dashboard.services.dashboard_service import get_station_drt_rankings

    try:
        rankings = await get_station_drt_rankings(_client(), district, month, model_type)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if not rankings:
        typer.echo("No DRT scores available")
        return
    for i, r in enumerate(rankings, start=1):
        typer.echo(f"{i:>2}. {r.station_name:<30s} {r.drt_score:6.1f}  {r.recommendation}")
