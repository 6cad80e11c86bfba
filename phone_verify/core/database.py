import logging
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from phone_verify.core.config import MONGO_URI, DATABASE_NAME, OTP_TTL_SECONDS

logger = logging.getLogger(__name__)


class MongoDB:
    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None


async def connect_to_mongo(uri: str = MONGO_URI, database_name: str = DATABASE_NAME) -> MongoDB:
    mongodb = MongoDB()
    mongodb.client = AsyncIOMotorClient(uri)
    # a database named in the URI wins over DATABASE_NAME
    mongodb.db = mongodb.client.get_default_database(default=database_name)

    await mongodb.client.admin.command("ping")
    logger.info(f"✅ MongoDB connected ({mongodb.db.name})")

    await ensure_indexes(mongodb.db)
    return mongodb


async def close_mongo_connection(mongodb: MongoDB):
    if mongodb.client is not None:
        mongodb.client.close()
    logger.info("🔌 MongoDB disconnected")


async def ensure_indexes(db: AsyncIOMotorDatabase, otp_ttl_seconds: int = OTP_TTL_SECONDS):
    await db.users.create_index([("phone", ASCENDING)], unique=True)
    await db.otps.create_index([("phone", ASCENDING)], unique=True)

    if otp_ttl_seconds > 0:
        await db.otps.create_index(
            [("created_at", ASCENDING)],
            expireAfterSeconds=otp_ttl_seconds,
        )
        logger.info(f"OTP records expire after {otp_ttl_seconds}s")
    else:
        logger.warning("OTP_TTL_SECONDS is 0, OTP records are stored until verified")


def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.mongodb.db
