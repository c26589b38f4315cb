"""Construction of the shared ``httpx.Client``.

A single builder keeps timeouts, headers and authentication consistent
across the account, organization and robot services, and lets tests
swap the transport for ``httpx.MockTransport``.
"""

from __future__ import annotations

import httpx

from robot_tokens.config import Settings


def build_http_client(
    settings: Settings,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an ``httpx.Client`` bound to ``settings.endpoint``.

    The bearer token, when configured, is attached to every request.
    """
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.token is not None:
        headers["Authorization"] = f"Bearer {settings.token.get_secret_value()}"
    return httpx.Client(
        base_url=settings.endpoint,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
