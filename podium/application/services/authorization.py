"""Role and ownership checks shared by the presentation use cases."""

from podium.application.dtos.principal import Principal
from podium.domain.exceptions import AuthorizationException


def ensure_admin(principal: Principal, resource: str, action: str) -> None:
    """Raise AuthorizationException unless principal has the admin role."""
    if not principal.is_admin:
        raise AuthorizationException(resource=resource, action=action)


def ensure_moderator(principal: Principal, resource: str, action: str) -> None:
    """Raise AuthorizationException unless principal is a moderator or admin."""
    if not principal.is_moderator:
        raise AuthorizationException(resource=resource, action=action)


def ensure_owner(principal: Principal, owner_id: str, resource: str, action: str) -> None:
    """Raise AuthorizationException unless principal is the resource owner."""
    if principal.id != owner_id:
        raise AuthorizationException(resource=resource, action=action)
