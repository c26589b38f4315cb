"""HTTP implementations of the core provider protocols.

This module is the **only** place in the codebase that talks to the
remote services.  All httpx exceptions are caught here and re-raised as
:class:`~robot_tokens.exceptions.UpstreamError` — nothing raw escapes
the infrastructure boundary.

Endpoints
---------
* ``GET /v1/accounts/{name}``
* ``GET /v1/organizations/{id}/robots``
* ``GET /v1/robots/{id}/tokens``
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from robot_tokens.exceptions import UpstreamError


class _ServiceClient:
    """Shared request/response handling for one remote service."""

    def __init__(self, client: httpx.Client) -> None:
        self._client: httpx.Client = client

    def _get_json(self, path: str) -> Any:
        """GET *path* and return the decoded JSON body.

        Raises
        ------
        UpstreamError
            On transport failures, timeouts, non-2xx statuses and bodies
            that are not valid JSON.
        """
        logger.debug("GET {}", path)
        try:
            response = self._client.get(path)
        except httpx.TimeoutException as exc:
            raise UpstreamError(str(exc) or f"request to {path} timed out") from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(str(exc) or f"request to {path} failed") from exc

        logger.debug("GET {} -> {}", path, response.status_code)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamError(self._error_message(response, exc)) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(f"invalid JSON from {path}: {exc}") from exc

    @staticmethod
    def _error_message(response: httpx.Response, exc: httpx.HTTPStatusError) -> str:
        """Prefer the service's own error text over httpx's summary."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("message", "error", "detail"):
                if isinstance(body.get(key), str) and body[key]:
                    return body[key]
        return str(exc)


class HttpAccountProvider(_ServiceClient):
    """Concrete :class:`~robot_tokens.core.protocols.AccountProvider`."""

    def get_account(self, account_name: str) -> dict[str, Any]:
        body = self._get_json(f"/v1/accounts/{quote(account_name, safe='')}")
        if not isinstance(body, dict):
            raise UpstreamError("unexpected account payload: expected an object")
        return body


class HttpOrganizationProvider(_ServiceClient):
    """Concrete :class:`~robot_tokens.core.protocols.OrganizationProvider`."""

    def list_robots(self, organization_id: str) -> list[dict[str, Any]]:
        body = self._get_json(
            f"/v1/organizations/{quote(organization_id, safe='')}/robots",
        )
        if isinstance(body, dict):
            body = body.get("data") or []
        if not isinstance(body, list):
            raise UpstreamError("unexpected robot list payload: expected a list")
        return body


class HttpRobotProvider(_ServiceClient):
    """Concrete :class:`~robot_tokens.core.protocols.RobotProvider`."""

    def list_tokens(self, robot_id: str) -> dict[str, Any]:
        body = self._get_json(f"/v1/robots/{quote(robot_id, safe='')}/tokens")
        if isinstance(body, list):
            return {"data": body}
        if not isinstance(body, dict):
            raise UpstreamError("unexpected token list payload: expected an object")
        return body
