import logging
from fastapi import HTTPException
from pymongo.errors import PyMongoError
from phone_verify.core.errors import SERVER_ERROR_MESSAGE
from phone_verify.modules.users.repository import UserRepository
from phone_verify.modules.users.schemas import MessageResponse, UserDetailsRequest

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def save_user_details(self, data: UserDetailsRequest) -> MessageResponse:
        if not (data.phone and data.name and data.dob and data.gender):
            raise HTTPException(status_code=400, detail="All fields are required")

        try:
            updated = await self.user_repo.update_user_details(
                data.phone, data.name, data.dob, data.gender
            )
        except PyMongoError as e:
            logger.error(f"Error in save_user_details: {e}")
            raise HTTPException(status_code=500, detail=SERVER_ERROR_MESSAGE)

        if not updated:
            raise HTTPException(status_code=404, detail="User not found")

        return MessageResponse(message="User details saved successfully")
