"""Core token service — resolves a robot and presents its tokens.

This is the central service class consumed by the CLI layer.  It
depends on the provider protocols of :mod:`robot_tokens.core.protocols`
injected at construction time, keeping the core free of any
external-system imports.

Flow
----
account lookup → organization → roster → robot id → token set → table.
Each remote call is issued only after the previous one has completed,
and the first failure ends the run.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Only :class:`~robot_tokens.exceptions.RobotTokensError` subclasses
  escape.
* No partial table is rendered for a failed run.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, TypeVar

from loguru import logger

from robot_tokens.core.models import Organization, TokenListing
from robot_tokens.core.payloads import parse_account, parse_robots, parse_tokens
from robot_tokens.core.protocols import (
    AccountProvider,
    OrganizationProvider,
    RobotProvider,
    TablePresenter,
)
from robot_tokens.core.resolver import resolve_robot_id
from robot_tokens.core.rows import TOKEN_TABLE_HEADER, build_rows
from robot_tokens.exceptions import (
    InvalidRobotNameError,
    NotAnOrganizationError,
    PresentationError,
    RobotTokensError,
    UpstreamError,
)

_T = TypeVar("_T")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def no_tokens_message(robot_name: str, account_name: str) -> str:
    """Informational line shown when a robot has no tokens."""
    return f"No tokens found for robot {robot_name} in {account_name}"


class RobotTokenService:
    """Stateless service that lists the tokens of one robot.

    Parameters
    ----------
    accounts:
        Any object satisfying the :class:`AccountProvider` protocol.
    organizations:
        Any object satisfying the :class:`OrganizationProvider` protocol.
    robots:
        Any object satisfying the :class:`RobotProvider` protocol.
    clock:
        Returns the reference time for token ages.  Defaults to UTC now.
    """

    def __init__(
        self,
        accounts: AccountProvider,
        organizations: OrganizationProvider,
        robots: RobotProvider,
        *,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._accounts: AccountProvider = accounts
        self._organizations: OrganizationProvider = organizations
        self._robots: RobotProvider = robots
        self._clock: Callable[[], datetime] = clock

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve_organization(self, account_name: str) -> Organization:
        """Return the organization behind *account_name*.

        Raises
        ------
        NotAnOrganizationError
            If the account is not an organization account.
        UpstreamError
            If the account service fails.
        """
        logger.debug("Resolving account {}", account_name)
        payload = self._call(self._accounts.get_account, account_name)
        account = parse_account(payload)
        if not account.is_organization:
            raise NotAnOrganizationError(account_name)
        if account.organization is None:
            raise UpstreamError(
                f"account {account_name} is an organization "
                "but no organization details were returned",
            )
        return account.organization

    def resolve_robot(
        self,
        organization: Organization,
        robot_name: str,
        account_name: str,
    ) -> str:
        """Return the identifier of the robot named *robot_name*.

        Raises
        ------
        RobotRosterEmptyError
            If the organization has no robots.
        RobotNotFoundError
            If no robot has the name.
        AmbiguousRobotNameError
            If more than one robot has the name.
        UpstreamError
            If the organization service fails.
        """
        logger.debug("Listing robots of organization {}", organization.id)
        payload = self._call(self._organizations.list_robots, organization.id)
        roster = parse_robots(payload)
        logger.debug("Roster has {} robot(s)", len(roster))
        return resolve_robot_id(roster, robot_name, account_name)

    def list_tokens(self, account_name: str, robot_name: str) -> TokenListing:
        """Resolve *robot_name* in *account_name* and fetch its tokens.

        Raises
        ------
        InvalidRobotNameError
            If *robot_name* is empty or blank.
        RobotTokensError
            Any resolution or upstream failure; see the individual steps.
        """
        self._validate_robot_name(robot_name)
        organization = self.resolve_organization(account_name)
        robot_id = self.resolve_robot(organization, robot_name, account_name)

        logger.debug("Listing tokens of robot {}", robot_id)
        payload = self._call(self._robots.list_tokens, robot_id)
        tokens = parse_tokens(payload)
        return TokenListing(
            account_name=account_name,
            robot_name=robot_name,
            robot_id=robot_id,
            tokens=tokens,
        )

    def show_tokens(
        self,
        account_name: str,
        robot_name: str,
        presenter: TablePresenter,
    ) -> TokenListing:
        """List the robot's tokens and hand them to *presenter*.

        A robot without tokens produces a single informational line and
        no table.

        Raises
        ------
        PresentationError
            If *presenter* fails to render the table.
        RobotTokensError
            Any failure raised by :meth:`list_tokens`.
        """
        listing = self.list_tokens(account_name, robot_name)
        if not listing:
            presenter.info(no_tokens_message(robot_name, account_name))
            return listing

        rows = build_rows(listing.tokens, self._clock())
        try:
            presenter.render(TOKEN_TABLE_HEADER, rows)
        except RobotTokensError:
            raise
        except Exception as exc:
            raise PresentationError(f"failed to render token table: {exc}") from exc
        return listing

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_robot_name(robot_name: str) -> None:
        if not robot_name or not robot_name.strip():
            raise InvalidRobotNameError(
                "Robot name must not be empty.",
                hint="Pass the robot's display name, e.g. `robot-tokens list my-robot`.",
            )

    @staticmethod
    def _call(func: Callable[[Any], _T], arg: Any) -> _T:
        """Invoke a provider method, wrapping foreign exceptions."""
        try:
            return func(arg)
        except RobotTokensError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise UpstreamError(str(exc) or type(exc).__name__) from exc
