from motor.motor_asyncio import AsyncIOMotorClient

from application.dtos.user_dtos import UserResponse
from application.ports.user_resolver import UserResolver
from infrastructure.config import Settings


class MongoUserResolver(UserResolver):
    """Read-only view over the users collection maintained by the accounts service."""

    def __init__(self, client: AsyncIOMotorClient, settings: Settings) -> None:
        self.client = client
        self.db = self.client[settings.mongo_db]
        self.users = self.db[settings.mongo_users_collection]

    async def get_user_by_id(self, user_id: str) -> UserResponse | None:
        doc = await self.users.find_one({"user_id": user_id}, projection={"_id": False})
        if not doc:
            return None
        return UserResponse(user_id=doc["user_id"], display_name=doc.get("display_name"))
