"""User domain service."""

from typing import Sequence
from uuid import UUID

import logfire

from fakeso.domain.error import InvalidReferenceError
from fakeso.domain.model import User
from fakeso.domain.repository import UserRepository
from fakeso.domain.value import UserId

from .base import Service

UNKNOWN_USER_NAME = "(unknown)"


class UserService(Service):
    """Domain service resolving user identities."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_identity(self, identity: str) -> User:
        """Resolve an external identity to a user.

        The identity may be a user ID (UUID string) or an e-mail address.

        Args:
            identity: User ID or e-mail

        Returns:
            The matching user

        Raises:
            InvalidReferenceError: If no user matches
        """
        with logfire.span("user_service.resolve_identity"):
            identity = identity.strip()
            user: User | None = None
            try:
                user_id = UserId(UUID(identity))
            except ValueError:
                user = await self.user_repository.find_by_email(identity)
            else:
                user = await self.user_repository.find_by_id(user_id)

            if user is None:
                logfire.warn("Identity did not resolve to a user")
                raise InvalidReferenceError("user", identity)
            return user

    async def require_user(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            InvalidReferenceError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=str(user_id))
            raise InvalidReferenceError("user", str(user_id))
        return user

    async def get_display_names(self, user_ids: Sequence[UserId]) -> dict[UserId, str]:
        """Map user IDs to usernames.

        Users that no longer exist are reported as "(unknown)".

        Args:
            user_ids: User IDs to look up

        Returns:
            Mapping with an entry for every requested ID
        """
        if not user_ids:
            return {}
        unique_ids = list(dict.fromkeys(user_ids))
        users = await self.user_repository.find_by_ids(unique_ids)
        names = {user.id: user.username for user in users}
        return {uid: names.get(uid, UNKNOWN_USER_NAME) for uid in unique_ids}
