"""Rich-backed :class:`~robot_tokens.core.protocols.TablePresenter`.

Renders the token table as plain, borderless columns separated by
three spaces, matching the look of other infrastructure CLIs so that
the output stays greppable.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from robot_tokens.cli.console import get_output_console
from robot_tokens.exceptions import EnvironmentError

COLUMN_SEPARATOR_WIDTH: int = 3


def _import_rich_table() -> tuple[type[Any], type[Any]]:
    """Import rich ``Table`` and ``Text`` lazily for token rendering."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table, Text


class RichTablePresenter:
    """Write tables and informational lines to a Rich console.

    Parameters
    ----------
    console:
        Target console.  Defaults to a stdout console; tests pass a
        console writing to ``io.StringIO``.
    """

    def __init__(self, console: Any | None = None) -> None:
        self._console: Any = console if console is not None else get_output_console()

    def render(
        self,
        header: Sequence[str],
        rows: Sequence[Sequence[str]],
    ) -> None:
        table_class, text_class = _import_rich_table()
        table = table_class(
            box=None,
            show_header=True,
            header_style="bold",
            show_edge=False,
            pad_edge=False,
            padding=(0, COLUMN_SEPARATOR_WIDTH, 0, 0),
        )
        for title in header:
            table.add_column(title, no_wrap=True)
        # Cell values come from the remote service; never treat them as markup.
        for row in rows:
            table.add_row(*(text_class(cell) for cell in row))
        self._console.print(table)

    def info(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False)
