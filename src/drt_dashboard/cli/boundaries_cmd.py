"""Boundary CLI commands for building the district map overlay."""

import json
from pathlib import Path

import typer

boundaries_app = typer.Typer()


@boundaries_app.command("extract")
def extract(
    input_path: Path | None = typer.Argument(  # noqa: B008
        None, help="Dong boundary dataset (.geojson, .json or .shp); defaults to BOUNDARY_FILE"
    ),
    output_path: Path | None = typer.Argument(None, help="Output GeoJSON file (stdout when omitted)"),  # noqa: B008
    region: str | None = typer.Option(None, "--region", help="Region name (sidonm) to keep"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unsupported geometry"),  # noqa: FBT001
    dissolve: bool = typer.Option(False, "--dissolve", help="Union sub-region polygons per district"),  # noqa: FBT001
    verify: bool = typer.Option(False, "--verify", help="Verify the file's .sha512.txt checksum first"),  # noqa: FBT001
) -> None:
    """Extract one MultiPolygon feature per district from a dong dataset."""
    from drt_dashboard.core.config import get_settings
    from drt_dashboard.services.district_map_service import load_district_overlay

    settings = get_settings()
    target_region = region or settings.target_region
    if input_path is None:
        input_path = Path(settings.boundary_file)
    if not input_path.exists():
        typer.echo(f"Error: Boundary file not found: {input_path}", err=True)
        raise typer.Exit(code=1)

    try:
        result = load_district_overlay(
            input_path,
            target_region,
            strict=strict or settings.boundary_strict,
            dissolve=dissolve or settings.boundary_dissolve,
            verify_checksum=verify,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    payload = json.dumps(result.to_geojson(), ensure_ascii=False)
    if output_path is None:
        typer.echo(payload)
    else:
        output_path.write_text(payload, encoding="utf-8")
        typer.echo(f"Districts written: {output_path}", err=True)

    typer.echo(f"  Region:          {target_region}", err=True)
    typer.echo(f"  Districts:       {len(result.features)}", err=True)
    typer.echo(f"  Polygons:        {result.polygon_count}", err=True)
    typer.echo(f"  Out of region:   {result.excluded_count}", err=True)
    typer.echo(f"  Skipped:         {len(result.skipped)}", err=True)
