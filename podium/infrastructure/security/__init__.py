"""Security: JWT verification and principal extraction."""

from podium.infrastructure.security.jwt import (
    create_access_token,
    principal_from_claims,
    verify_token,
)

__all__ = ["create_access_token", "principal_from_claims", "verify_token"]
