"""Authenticated principal passed explicitly to every core operation."""

from dataclasses import dataclass

from podium.domain.enums import UserRole


@dataclass(frozen=True)
class Principal:
    """Identity and role of the caller (resolved by the identity collaborator)."""

    id: str
    role: UserRole = UserRole.MEMBER

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    @property
    def is_moderator(self) -> bool:
        """Moderators and admins both count as moderators."""
        return self.role in (UserRole.MODERATOR, UserRole.ADMIN)
