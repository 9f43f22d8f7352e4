"""District lookup CLI commands."""

import typer

from drt_dashboard.lib.districts import is_known_district, list_districts, resolve_district_id, resolve_district_name

districts_app = typer.Typer()


@districts_app.command("resolve")
def resolve(name: str = typer.Argument(..., help="District display name, e.g. 강남구")) -> None:
    """Print the identifier for a district display name."""
    identifier = resolve_district_id(name)
    if not is_known_district(name):
        typer.echo(f"Warning: {name!r} is not a known district, using fallback identifier", err=True)
    typer.echo(identifier)


@districts_app.command("name")
def name(identifier: str = typer.Argument(..., help="District identifier, e.g. gangnam")) -> None:
    """Print the display name for a district identifier."""
    typer.echo(resolve_district_name(identifier))


@districts_app.command("list")
def list_all() -> None:
    """List every known district and its identifier."""
    for display_name, identifier in list_districts():
        typer.echo(f"{identifier:<14s} {display_name}")
