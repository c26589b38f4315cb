"""``robot-tokens doctor`` — environment diagnostics command.

Gathers runtime and configuration information and renders a Rich table
summarising whether robot-tokens is ready to talk to the remote
services.  No request is sent; the bearer token is never displayed.
"""

from __future__ import annotations

import platform
import sys

from robot_tokens.cli import exit_codes
from robot_tokens.cli.console import console
from robot_tokens.config import Settings, load_settings
from robot_tokens.exceptions import ConfigurationError
from robot_tokens.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _httpx_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the httpx row."""
    try:
        import httpx
    except ImportError:
        return "httpx", "NOT INSTALLED", FAIL
    return "httpx", getattr(httpx, "__version__", "unknown"), OK


def _settings_checks(settings: Settings) -> list[tuple[str, str, str]]:
    """Return the account, endpoint and token rows."""
    rows: list[tuple[str, str, str]] = []
    if settings.account is None:
        rows.append(("Account", "not set (UP_ACCOUNT)", WARN))
    else:
        rows.append(("Account", settings.account, OK))
    rows.append(("Endpoint", settings.endpoint, OK))
    if settings.token is None:
        rows.append(("Token", "not set (UP_TOKEN)", WARN))
    else:
        rows.append(("Token", "set", OK))
    return rows


def _configuration_checks() -> list[tuple[str, str, str]]:
    """Load settings and describe them, or report why loading failed."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        return [("Config", str(exc), FAIL)]
    return _settings_checks(settings)


def _tool_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the robot-tokens version row."""
    return "robot-tokens", __version__, OK


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Warnings do not fail.
    """
    from rich.table import Table

    checks = [
        _tool_version_check(),
        _python_version_check(),
        _httpx_version_check(),
        *_configuration_checks(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    table = Table(
        title="robot-tokens doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
