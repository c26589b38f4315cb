"""Pin a robot name to exactly one robot identifier.

The robot directory does not treat names as a uniqueness key, so a
name that matches more than one robot is a hard error rather than a
silent pick of the first match.
"""

from __future__ import annotations

from collections.abc import Sequence

from robot_tokens.core.models import Robot
from robot_tokens.exceptions import (
    AmbiguousRobotNameError,
    RobotNotFoundError,
    RobotRosterEmptyError,
)


def resolve_robot_id(
    roster: Sequence[Robot],
    name: str,
    account_name: str,
) -> str:
    """Return the identifier of the single robot in *roster* named *name*.

    Raises
    ------
    RobotRosterEmptyError
        If *roster* is empty.
    AmbiguousRobotNameError
        As soon as a second robot with *name* is seen.
    RobotNotFoundError
        If no robot in *roster* is named *name*.
    """
    if not roster:
        raise RobotRosterEmptyError(name, account_name)

    candidate: str | None = None
    for robot in roster:
        if robot.name != name:
            continue
        if candidate is not None:
            raise AmbiguousRobotNameError(name, account_name)
        candidate = robot.id

    if candidate is None:
        raise RobotNotFoundError(name, account_name)
    return candidate
