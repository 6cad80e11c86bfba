from fastapi import APIRouter, Depends
from phone_verify.modules.users.schemas import MessageResponse, UserDetailsRequest
from phone_verify.modules.users.dependencies import get_user_service
from phone_verify.modules.users.service import UserService

user_router = APIRouter(tags=["User"])

@user_router.post("/save-user-details", response_model=MessageResponse)
async def save_user_details(
    data: UserDetailsRequest,
    user_service: UserService = Depends(get_user_service),
    ):
    return await user_service.save_user_details(data)
