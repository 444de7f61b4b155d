from abc import ABC, abstractmethod

from application.dtos.user_dtos import UserResponse


class UserResolver(ABC):
    """Looks up users owned by another part of the system."""

    @abstractmethod
    async def get_user_by_id(self, user_id: str) -> UserResponse | None:
        pass
