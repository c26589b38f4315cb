"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from robot_tokens.core.humanize import humanize_created, humanize_timestamp
from robot_tokens.core.models import (
    Account,
    AccountKind,
    Organization,
    Robot,
    Token,
    TokenListing,
)
from robot_tokens.core.protocols import (
    AccountProvider,
    OrganizationProvider,
    RobotProvider,
    TablePresenter,
)
from robot_tokens.core.resolver import resolve_robot_id
from robot_tokens.core.rows import TOKEN_TABLE_HEADER, build_rows
from robot_tokens.core.token_service import RobotTokenService

__all__: list[str] = [
    "TOKEN_TABLE_HEADER",
    "Account",
    "AccountKind",
    "AccountProvider",
    "Organization",
    "OrganizationProvider",
    "Robot",
    "RobotProvider",
    "RobotTokenService",
    "TablePresenter",
    "Token",
    "TokenListing",
    "build_rows",
    "humanize_created",
    "humanize_timestamp",
    "resolve_robot_id",
]
