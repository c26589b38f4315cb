"""Domain models for robot-tokens.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and are discarded at the end of each invocation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------

class AccountKind(str, enum.Enum):
    """Kind of an account.  Only organizations own robots."""

    ORGANIZATION = "organization"
    USER = "user"


@dataclass(frozen=True, slots=True)
class Organization:
    """An organization derived from an organization account."""

    id: str
    """Opaque organization identifier used to address its robots."""

    name: str


@dataclass(frozen=True, slots=True)
class Account:
    """An account as reported by the account service."""

    id: str
    name: str
    kind: AccountKind

    organization: Organization | None = None
    """Present only when :attr:`kind` is :attr:`AccountKind.ORGANIZATION`."""

    @property
    def is_organization(self) -> bool:
        return self.kind is AccountKind.ORGANIZATION


# ---------------------------------------------------------------------------
# Robots and tokens
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Robot:
    """A service identity belonging to an organization."""

    id: str
    """Opaque, unique identifier."""

    name: str
    """Display name.  NOT unique within an organization."""


@dataclass(frozen=True, slots=True)
class Token:
    """A credential issued to a robot."""

    id: str

    name: str | None
    """Value of the ``name`` attribute, or ``None`` when absent."""

    created_at: str | None
    """Raw ``createdAt`` metadata value, or ``None`` when absent."""


@dataclass(frozen=True, slots=True)
class TokenListing:
    """Result of resolving a robot and listing its tokens.

    Falsy when the robot has no tokens.
    """

    account_name: str
    robot_name: str
    robot_id: str
    tokens: tuple[Token, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return len(self.tokens) > 0
