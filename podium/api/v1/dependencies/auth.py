"""Principal and scheduler-trigger dependencies (composition root)."""

from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from podium.application.dtos.principal import Principal
from podium.core.config import get_settings
from podium.domain.exceptions import AuthenticationException, AuthorizationException
from podium.infrastructure.security.jwt import principal_from_claims, verify_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_principal_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> Principal | None:
    """Return principal from JWT if present and valid; else None. Use for optional auth routes."""
    if not credentials:
        return None
    try:
        return principal_from_claims(verify_token(credentials.credentials))
    except (ValueError, KeyError):
        return None


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> Principal:
    """Return principal from JWT; raise 401 if missing or invalid."""
    if not credentials:
        raise AuthenticationException()
    try:
        return principal_from_claims(verify_token(credentials.credentials))
    except (ValueError, KeyError) as e:
        raise AuthenticationException(str(e)) from e


async def require_cron_secret(
    x_cron_secret: Annotated[str | None, Header()] = None,
) -> None:
    """Guard scheduler triggers. Triggers are disabled while CRON_SECRET is unset."""
    expected = get_settings().cron_secret
    if (
        expected is None
        or not expected.get_secret_value()
        or not x_cron_secret
        or not secrets.compare_digest(x_cron_secret, expected.get_secret_value())
    ):
        raise AuthorizationException(resource="sweep", action="run")
