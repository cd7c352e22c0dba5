"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from fakeso.domain.model.user import User
from fakeso.domain.value import UserId


class UserRepository(ABC):
    """Read access to user accounts for identity resolution."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by e-mail address."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users in a single query."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
