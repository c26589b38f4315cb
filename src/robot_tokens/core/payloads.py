"""Raw-payload → domain-model parsing.

Providers hand back plain dicts decoded from the remote services.  The
functions here flatten them into the frozen models of
:mod:`robot_tokens.core.models`, deciding at construction time which
optional fields are present.

Structural problems (a missing identifier, a list where a mapping was
expected) raise :class:`~robot_tokens.exceptions.UpstreamError`; missing
display fields do not.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from robot_tokens.core.humanize import CREATED_AT_KEY
from robot_tokens.core.models import Account, AccountKind, Organization, Robot, Token
from robot_tokens.exceptions import UpstreamError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _as_mapping(value: object, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise UpstreamError(f"unexpected {what} payload: expected an object")
    return value


def _required_id(item: Mapping[str, Any], what: str) -> str:
    raw = item.get("id")
    if raw is None or raw == "":
        raise UpstreamError(f"unexpected {what} payload: missing id")
    return str(raw)


def _unwrap_data(payload: object, what: str) -> list[Any]:
    """Return the item list of a bare list or a ``{"data": [...]}`` envelope."""
    if isinstance(payload, Mapping):
        payload = payload.get("data")
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise UpstreamError(f"unexpected {what} payload: expected a list")
    return payload


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------

def parse_account(payload: object) -> Account:
    """Parse an account-service response into an :class:`Account`."""
    body = _as_mapping(payload, "account")
    account = _as_mapping(body.get("account"), "account")

    raw_kind = str(account.get("type", "")).lower()
    try:
        kind = AccountKind(raw_kind)
    except ValueError:
        raise UpstreamError(
            f"unexpected account payload: unknown account type {raw_kind!r}",
        ) from None

    name = str(account.get("name", ""))
    organization: Organization | None = None
    raw_org = body.get("organization")
    if raw_org is not None:
        org = _as_mapping(raw_org, "organization")
        organization = Organization(
            id=_required_id(org, "organization"),
            name=str(org.get("name", name)),
        )

    return Account(
        id=_required_id(account, "account"),
        name=name,
        kind=kind,
        organization=organization,
    )


# ---------------------------------------------------------------------------
# Robots
# ---------------------------------------------------------------------------

def parse_robot(item: object) -> Robot:
    """Parse one roster entry.  The name may be top-level or an attribute."""
    raw = _as_mapping(item, "robot")
    name = raw.get("name")
    if name is None:
        attributes = raw.get("attributes")
        if isinstance(attributes, Mapping):
            name = attributes.get("name")
    return Robot(
        id=_required_id(raw, "robot"),
        name="" if name is None else str(name),
    )


def parse_robots(payload: object) -> tuple[Robot, ...]:
    """Parse a full organization roster."""
    return tuple(parse_robot(item) for item in _unwrap_data(payload, "robot list"))


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

def parse_token(item: object) -> Token:
    """Parse one token entry, keeping ``name``/``createdAt`` optional."""
    raw = _as_mapping(item, "token")
    attributes = raw.get("attributes")
    meta = raw.get("meta")

    name: str | None = None
    if isinstance(attributes, Mapping) and attributes.get("name") is not None:
        name = str(attributes["name"])

    created_at: str | None = None
    if isinstance(meta, Mapping) and meta.get(CREATED_AT_KEY) is not None:
        created_at = str(meta[CREATED_AT_KEY])

    return Token(id=_required_id(raw, "token"), name=name, created_at=created_at)


def parse_tokens(payload: object) -> tuple[Token, ...]:
    """Parse a robot's token set."""
    return tuple(parse_token(item) for item in _unwrap_data(payload, "token list"))
