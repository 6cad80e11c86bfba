from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError
from datetime import datetime, timezone
from phone_verify.core.database import get_database
from phone_verify.modules.users.models import User


class UserRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def create_user_if_absent(self, user: User) -> bool:
        """Insert ``user`` unless its phone is already registered.

        Returns True when a new document was written.
        """
        try:
            result = await self.db.users.update_one(
                {"phone": user.phone},
                {"$setOnInsert": user.model_dump()},
                upsert=True,
            )
        except DuplicateKeyError:
            # a concurrent request inserted the same phone first
            return False
        return result.upserted_id is not None

    async def update_user_details(self, phone: str, name: str, dob: str, gender: str) -> bool:
        result = await self.db.users.update_one(
            {"phone": phone},
            {
                "$set": {
                    "name": name,
                    "dob": dob,
                    "gender": gender,
                    "updated_at": datetime.now(timezone.utc),
                }
            },
        )
        return result.matched_count > 0
