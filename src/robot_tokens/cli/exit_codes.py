"""Exit-code constants used by the CLI layer.

Every exit path uses one of these values; scripts wrapping
``robot-tokens`` can rely on them.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed, including the "no tokens found" outcome."""

GENERAL_ERROR: int = 1
"""A known RobotTokensError was caught and its message displayed."""

USAGE_ERROR: int = 2
"""Invalid command line.  Raised by argparse itself via ``SystemExit``."""

UNEXPECTED_ERROR: int = 70
"""An unhandled exception escaped all known error boundaries (EX_SOFTWARE)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C (128 + SIGINT)."""
