"""Analytics backend health check command.

Hits each backend service's health endpoint plus the DRT model catalogue
and reports pass/fail status. Pure HTTP client, no dashboard state.

Uses its own synchronous ``httpx.Client`` instead of
``AnalyticsClient.health_check``: every endpoint must produce a result row,
so raw status codes and bodies are inspected without schema validation and
a failing endpoint becomes a FAIL row rather than an ``AnalyticsApiError``.
"""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Any

import httpx
import typer

from drt_dashboard.lib.analytics import HEALTH_ENDPOINTS


class CheckStatus(enum.Enum):
    """Result status for a single endpoint check."""

    PASS = "pass"  # noqa: S105
    FAIL = "fail"


@dataclass
class CheckResult:
    """Outcome of a single endpoint check."""

    name: str
    status: CheckStatus
    message: str
    endpoint: str
    response_time_ms: float = 0.0
    details: list[str] = field(default_factory=list)


def _style_status(status: CheckStatus) -> str:
    """Return a colored, fixed-width status label."""
    if status is CheckStatus.PASS:
        return typer.style("PASS", fg=typer.colors.GREEN, bold=True)
    return typer.style("FAIL", fg=typer.colors.RED, bold=True)


def _request(client: httpx.Client, url: str) -> tuple[httpx.Response | None, float, str | None]:
    """Issue one GET request and return (response, elapsed_ms, error_msg)."""
    start = time.monotonic()
    try:
        resp = client.request("GET", url, follow_redirects=True)
        elapsed = (time.monotonic() - start) * 1000
        return resp, elapsed, None
    except httpx.TimeoutException:
        elapsed = (time.monotonic() - start) * 1000
        return None, elapsed, "Request timed out"
    except httpx.ConnectError:
        elapsed = (time.monotonic() - start) * 1000
        return None, elapsed, "Connection refused"
    except httpx.HTTPError as exc:
        elapsed = (time.monotonic() - start) * 1000
        return None, elapsed, f"HTTP error: {exc}"


def _json_or_none(resp: httpx.Response) -> tuple[Any, str | None]:
    """Attempt to parse JSON; return (data, error_msg)."""
    try:
        return resp.json(), None
    except ValueError:
        return None, "Response is not valid JSON"


def _check_service_health(client: httpx.Client, base: str, service: str) -> CheckResult:
    endpoint = HEALTH_ENDPOINTS[service]
    resp, ms, err = _request(client, base + endpoint)
    if err:
        return CheckResult(service, CheckStatus.FAIL, err, endpoint, ms)
    assert resp is not None
    if resp.status_code != 200:
        return CheckResult(service, CheckStatus.FAIL, f"HTTP {resp.status_code}", endpoint, ms)
    data, jerr = _json_or_none(resp)
    if jerr:
        return CheckResult(service, CheckStatus.FAIL, jerr, endpoint, ms)
    if isinstance(data, dict) and data.get("success") is False:
        return CheckResult(service, CheckStatus.FAIL, data.get("message") or "success=false", endpoint, ms)
    details = [data.get("message")] if isinstance(data, dict) and data.get("message") else []
    return CheckResult(service, CheckStatus.PASS, "ok", endpoint, ms, details)


def _check_drt_models(client: httpx.Client, base: str) -> CheckResult:
    endpoint = "/api/v1/drt-score/models"
    resp, ms, err = _request(client, base + endpoint)
    if err:
        return CheckResult("drt-models", CheckStatus.FAIL, err, endpoint, ms)
    assert resp is not None
    if resp.status_code != 200:
        return CheckResult("drt-models", CheckStatus.FAIL, f"HTTP {resp.status_code}", endpoint, ms)
    data, jerr = _json_or_none(resp)
    if jerr:
        return CheckResult("drt-models", CheckStatus.FAIL, jerr, endpoint, ms)
    models = data.get("models") if isinstance(data, dict) else None
    if not models:
        return CheckResult("drt-models", CheckStatus.FAIL, "no DRT models listed", endpoint, ms)
    if not isinstance(models, list) or not all(isinstance(m, dict) for m in models):
        return CheckResult("drt-models", CheckStatus.FAIL, "malformed DRT model list", endpoint, ms)
    details = [f"models={','.join(str(m.get('type')) for m in models)}"]
    return CheckResult("drt-models", CheckStatus.PASS, "ok", endpoint, ms, details)


def _run_all_checks(client: httpx.Client, base: str) -> list[CheckResult]:
    """Execute all checks sequentially and return results in order."""
    results = [_check_service_health(client, base, service) for service in HEALTH_ENDPOINTS]
    results.append(_check_drt_models(client, base))
    return results


def _print_results(results: list[CheckResult], *, verbose: bool) -> None:
    for result in results:
        status_label = _style_status(result.status)
        time_str = f"({result.response_time_ms:.0f}ms)" if result.response_time_ms > 0 else ""
        typer.echo(f"  {status_label}  {result.name:<20s} {time_str}")
        if result.status is CheckStatus.FAIL:
            typer.echo(f"         {result.message}")
        if verbose and result.details:
            for detail in result.details:
                typer.echo(f"         {detail}")


def health_check(
    url: str | None = typer.Option(None, "--url", help="Base URL of the analytics backend (defaults to settings)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output per check"),
    timeout: int = typer.Option(10, "--timeout", help="Per-request timeout in seconds"),
) -> None:
    """Check that every analytics backend service is reachable and healthy."""
    if url is None:
        from drt_dashboard.core.config import get_settings

        url = get_settings().analytics_api_url
    base = url.rstrip("/")

    typer.echo(f"Analytics Health Check: {base}")
    typer.echo("=" * 56)

    start = time.monotonic()
    with httpx.Client(timeout=timeout) as client:
        results = _run_all_checks(client, base)
    total_time = time.monotonic() - start

    _print_results(results, verbose=verbose)

    passed = sum(1 for r in results if r.status is CheckStatus.PASS)
    failed = sum(1 for r in results if r.status is CheckStatus.FAIL)

    typer.echo("=" * 56)
    typer.echo(f"Results: {passed} passed, {failed} failed ({total_time:.2f}s total)")

    if failed > 0:
        raise typer.Exit(code=1)
