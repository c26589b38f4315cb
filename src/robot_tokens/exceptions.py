"""Custom exception hierarchy for robot-tokens.

All exceptions that cross layer boundaries must inherit from
:class:`RobotTokensError`.  Raw third-party exceptions (e.g. from httpx
or pydantic) must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here.

Every class carries an :class:`ErrorKind` so callers can branch on the
kind of failure instead of parsing messages.

Hierarchy
---------
RobotTokensError
├── InvalidRobotNameError
├── NotAnOrganizationError
├── RobotLookupError
│   ├── RobotNotFoundError
│   │   └── RobotRosterEmptyError
│   └── AmbiguousRobotNameError
├── UpstreamError
├── PresentationError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """Closed set of failure kinds surfaced by robot-tokens."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_AN_ORGANIZATION = "not_an_organization"
    ROBOT_ROSTER_EMPTY = "robot_roster_empty"
    ROBOT_NOT_FOUND = "robot_not_found"
    AMBIGUOUS_ROBOT_NAME = "ambiguous_robot_name"
    UPSTREAM = "upstream"
    PRESENTATION = "presentation"
    CONFIGURATION = "configuration"
    ENVIRONMENT = "environment"


class RobotTokensError(Exception):
    """Base exception for all robot-tokens errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    kind: ErrorKind = ErrorKind.UPSTREAM

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidRobotNameError(RobotTokensError):
    """Raised when the requested robot name is empty or blank."""

    kind = ErrorKind.INVALID_ARGUMENT


# --- Account / robot resolution --------------------------------------------

class NotAnOrganizationError(RobotTokensError):
    """Raised when the resolved account is not an organization."""

    kind = ErrorKind.NOT_AN_ORGANIZATION

    def __init__(self, account_name: str) -> None:
        super().__init__(
            "robots are not currently supported for user accounts",
            hint=f"Account {account_name!r} is a user account; "
            "pass an organization with --account.",
        )
        self.account_name: str = account_name


class RobotLookupError(RobotTokensError):
    """Base for failures to pin a robot name to exactly one robot."""

    message_format: str = "could not find robot {robot} in {account}"

    def __init__(self, robot_name: str, account_name: str) -> None:
        super().__init__(
            self.message_format.format(robot=robot_name, account=account_name),
        )
        self.robot_name: str = robot_name
        self.account_name: str = account_name


class RobotNotFoundError(RobotLookupError):
    """Raised when no robot in the organization roster has the name."""

    kind = ErrorKind.ROBOT_NOT_FOUND


class RobotRosterEmptyError(RobotNotFoundError):
    """Raised when the organization has no robots at all.

    Shares the user-facing message of :class:`RobotNotFoundError`.
    """

    kind = ErrorKind.ROBOT_ROSTER_EMPTY


class AmbiguousRobotNameError(RobotLookupError):
    """Raised when two or more robots share the requested name."""

    kind = ErrorKind.AMBIGUOUS_ROBOT_NAME
    message_format = "found multiple robots named {robot} in {account}"


# --- Remote services / output ----------------------------------------------

class UpstreamError(RobotTokensError):
    """Raised when a remote service call fails.

    The message is the underlying error text, unmodified.
    """

    kind = ErrorKind.UPSTREAM


class PresentationError(RobotTokensError):
    """Raised when the output sink fails to render the token table."""

    kind = ErrorKind.PRESENTATION


# --- Environment / configuration -------------------------------------------

class ConfigurationError(RobotTokensError):
    """Raised when settings are missing or invalid."""

    kind = ErrorKind.CONFIGURATION


class EnvironmentError(RobotTokensError):
    """Raised when a required runtime dependency is not available."""

    kind = ErrorKind.ENVIRONMENT
