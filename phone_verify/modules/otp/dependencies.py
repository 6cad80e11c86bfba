from fastapi import Depends
from phone_verify.modules.otp.repository import OTPRepository
from phone_verify.modules.users.repository import UserRepository
from phone_verify.modules.otp.service import OTPService

def get_otp_service(
    otp_repo: OTPRepository = Depends(),
    user_repo: UserRepository = Depends(),
) -> OTPService:
    return OTPService(
        otp_repo=otp_repo,
        user_repo=user_repo,
    )
