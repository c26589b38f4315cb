"""Infrastructure layer — external system integration.

This layer wraps all interaction with the remote account, organization
and robot services.  Every raw third-party exception must be caught here
and re-raised as a :class:`~robot_tokens.exceptions.RobotTokensError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from robot_tokens.infra.http_client import build_http_client
from robot_tokens.infra.upbound_api import (
    HttpAccountProvider,
    HttpOrganizationProvider,
    HttpRobotProvider,
)

__all__: list[str] = [
    "HttpAccountProvider",
    "HttpOrganizationProvider",
    "HttpRobotProvider",
    "build_http_client",
]
