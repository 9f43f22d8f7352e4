"""Typer CLI root application."""

import typer

from drt_dashboard.core.config import get_settings
from drt_dashboard.core.logging import setup_logging

app = typer.Typer(name="drt-dashboard", help="Seoul DRT planning dashboard toolkit")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from drt_dashboard.cli.analytics_cmd import analytics_app
    from drt_dashboard.cli.boundaries_cmd import boundaries_app
    from drt_dashboard.cli.districts_cmd import districts_app
    from drt_dashboard.cli.health_check_cmd import health_check

    app.add_typer(boundaries_app, name="boundaries", help="District boundary extraction commands")
    app.add_typer(districts_app, name="districts", help="District name and identifier lookups")
    app.add_typer(analytics_app, name="analytics", help="Analytics backend queries")
    app.command("health-check")(health_check)


_register_subcommands()
