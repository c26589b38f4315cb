"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class AccountProvider(Protocol):
    """Contract for the account directory."""

    def get_account(self, account_name: str) -> dict[str, Any]:
        """Fetch the raw account record for *account_name*.

        The returned dict must contain:

        * ``"account"`` — ``{"id", "name", "type"}``
        * ``"organization"`` — ``{"id", "name"}`` for organization
          accounts, absent or ``None`` otherwise.

        Raises
        ------
        UpstreamError
            When the service cannot be reached or answers with an error.
        """
        ...  # pragma: no cover


class OrganizationProvider(Protocol):
    """Contract for the organization service."""

    def list_robots(self, organization_id: str) -> list[dict[str, Any]]:
        """Return the full robot roster of an organization in one call.

        Each item carries an ``"id"`` and a ``"name"`` (either at the top
        level or under ``"attributes"``).

        Raises
        ------
        UpstreamError
            When the service cannot be reached or answers with an error.
        """
        ...  # pragma: no cover


class RobotProvider(Protocol):
    """Contract for the robot service."""

    def list_tokens(self, robot_id: str) -> dict[str, Any]:
        """Return the raw token set of a robot.

        The returned dict wraps the tokens under ``"data"``; each item has
        an ``"id"``, an ``"attributes"`` mapping and a ``"meta"`` mapping.

        Raises
        ------
        UpstreamError
            When the service cannot be reached or answers with an error.
        """
        ...  # pragma: no cover


class TablePresenter(Protocol):
    """Output sink for the token table and informational messages."""

    def render(
        self,
        header: Sequence[str],
        rows: Sequence[Sequence[str]],
    ) -> None:
        """Render *header* followed by *rows*.

        Any exception raised here is reported as a presentation failure.
        """
        ...  # pragma: no cover

    def info(self, message: str) -> None:
        """Emit a single informational line."""
        ...  # pragma: no cover
