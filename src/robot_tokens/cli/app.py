"""CLI application entry point and command routing for robot-tokens.

This module is the **sole error boundary** for the entire application.
It catches :class:`~robot_tokens.exceptions.RobotTokensError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from robot_tokens.cli import exit_codes
from robot_tokens.cli.console import console
from robot_tokens.exceptions import RobotTokensError
from robot_tokens.utils.logging import configure_logging
from robot_tokens.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``robot-tokens list <robot-name>``  — list a robot's tokens
    * ``robot-tokens doctor``             — environment diagnostics
    * ``robot-tokens --version``
    """
    parser = argparse.ArgumentParser(
        prog="robot-tokens",
        description="List the authentication tokens of an organization robot.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each resolution step and HTTP request to stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    list_parser = commands.add_parser(
        "list",
        help="List the tokens of a robot.",
        description="Resolve a robot by name and list its tokens.",
    )
    list_parser.add_argument("robot_name", metavar="ROBOT_NAME", help="Name of robot.")
    list_parser.add_argument(
        "-a",
        "--account",
        default=None,
        help="Organization account (defaults to UP_ACCOUNT).",
    )
    list_parser.add_argument(
        "--endpoint",
        default=None,
        help="API endpoint (defaults to UP_ENDPOINT or https://api.upbound.io).",
    )

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list(robot_name: str, account: str | None, endpoint: str | None) -> int:
    """Dispatch ``robot-tokens list``.

    Flow:
    1. Load settings, letting command-line flags win.
    2. Build the HTTP client and the three service providers.
    3. Resolve the robot and render its tokens (or the "no tokens" line).
    """
    from robot_tokens.cli.table import RichTablePresenter
    from robot_tokens.config import load_settings
    from robot_tokens.core.token_service import RobotTokenService
    from robot_tokens.infra import http_client
    from robot_tokens.infra.upbound_api import (
        HttpAccountProvider,
        HttpOrganizationProvider,
        HttpRobotProvider,
    )

    settings = load_settings(account=account, endpoint=endpoint)
    account_name = settings.require_account()

    with http_client.build_http_client(settings) as client:
        service = RobotTokenService(
            HttpAccountProvider(client),
            HttpOrganizationProvider(client),
            HttpRobotProvider(client),
        )
        service.show_tokens(account_name, robot_name, RichTablePresenter())
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from robot_tokens.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the robot-tokens CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)

    if args.command == "doctor":
        return _handle_doctor()

    return _handle_list(args.robot_name, args.account, args.endpoint)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RobotTokensError as exc:
        from rich.markup import escape

        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        from rich.markup import escape

        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
