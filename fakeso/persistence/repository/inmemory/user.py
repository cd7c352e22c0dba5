"""In-memory user repository for testing."""

from typing import Optional, Sequence

from fakeso.domain.model.user import User
from fakeso.domain.repository.user import UserRepository
from fakeso.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user

    def delete(self, user_id: UserId) -> None:
        """Remove an account, as the external account service would."""
        self._users.pop(user_id, None)
