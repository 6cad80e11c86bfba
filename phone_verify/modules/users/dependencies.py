from fastapi import Depends
from phone_verify.modules.users.repository import UserRepository
from phone_verify.modules.users.service import UserService

def get_user_service(
    user_repo: UserRepository = Depends(),
) -> UserService:
    return UserService(user_repo)
