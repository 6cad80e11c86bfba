from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from phone_verify.core.database import get_database
from phone_verify.modules.otp.models import OTPRecord


class OTPRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def upsert_otp(self, record: OTPRecord):
        return await self.db.otps.update_one(
            {"phone": record.phone},
            {"$set": {"otp": record.otp, "created_at": record.created_at}},
            upsert=True,
        )

    async def find_otp(self, phone: str) -> dict:
        return await self.db.otps.find_one({"phone": phone}, {"_id": 0})

    async def consume_otp(self, phone: str, otp: str) -> dict:
        # match and delete in one step so a code is only ever accepted once
        return await self.db.otps.find_one_and_delete(
            {"phone": phone, "otp": otp},
            projection={"_id": 0},
        )
