"""Shape tokens into table rows (pure transforms — no I/O)."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from loguru import logger

from robot_tokens.core.humanize import humanize_timestamp
from robot_tokens.core.models import Token

TOKEN_TABLE_HEADER: tuple[str, str, str] = ("NAME", "ID", "CREATED")


def build_row(token: Token, now: datetime | None = None) -> tuple[str, str, str]:
    """Return the ``(name, id, created)`` cells for a single token."""
    if token.name is None:
        logger.warning("Token {} has no name attribute", token.id)
    name = token.name if token.name is not None else ""
    return name, token.id, humanize_timestamp(token.created_at, now)


def build_rows(
    tokens: Sequence[Token],
    now: datetime | None = None,
) -> list[tuple[str, str, str]]:
    """Return one row per token, in input order.

    The header is not included; see :data:`TOKEN_TABLE_HEADER`.
    """
    return [build_row(token, now) for token in tokens]
