"""Allow ``python -m robot_tokens`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m robot_tokens`` behaves identically to the
``robot-tokens`` console script.
"""

from __future__ import annotations

from robot_tokens.cli.app import cli

if __name__ == "__main__":
    cli()
