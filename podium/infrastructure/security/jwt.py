"""JWT verification for authentication.

Tokens are issued by the identity provider with the same signing key; this
service only verifies them and reads the principal (sub + role claims).
Uses podium.core.config for secret and algorithm.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from podium.application.dtos.principal import Principal
from podium.core.config import get_settings
from podium.domain.enums import UserRole

DEFAULT_TOKEN_TTL = timedelta(minutes=60)


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims (local tooling and tests).

    Args:
        data: Claims to encode (sub, role).
        expires_delta: Optional TTL; defaults to one hour.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    to_encode["exp"] = datetime.now(UTC) + (expires_delta or DEFAULT_TOKEN_TTL)
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub. Raises ValueError if the token is
    invalid, expired, or missing required claims.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload


def principal_from_claims(payload: dict[str, Any]) -> Principal:
    """Build the principal from verified claims. Missing role means member.

    Raises:
        ValueError: If the role claim is not a known role.
    """
    role = payload.get("role") or UserRole.MEMBER.value
    try:
        return Principal(id=str(payload["sub"]), role=UserRole(role))
    except ValueError as e:
        raise ValueError(f"Invalid role claim: {role!r}") from e
