"""CLI console helpers.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) never pay for it.  Diagnostics and errors go to stderr;
command output (the token table) goes to stdout.
"""

from __future__ import annotations

from typing import Any

from robot_tokens.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def get_output_console() -> Any:
	"""Create a Rich console instance targeting stdout."""
	console_class = _load_rich_console_class()
	return console_class(highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy over a fresh stderr console."""

	def print(self, *objects: object) -> None:
		get_rich_console().print(*objects)


console = _ConsoleProxy()
