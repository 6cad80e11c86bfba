from fastapi import APIRouter, Depends
from phone_verify.modules.otp.schemas import PhoneRequest, VerifyOTPRequest, OTPResponse
from phone_verify.modules.users.schemas import MessageResponse
from phone_verify.modules.otp.service import OTPService
from phone_verify.modules.otp.dependencies import get_otp_service

otp_router = APIRouter(tags=["OTP"])

@otp_router.post("/send-otp", response_model=OTPResponse)
async def send_otp(
    data: PhoneRequest,
    service: OTPService = Depends(get_otp_service)
    ):
    return await service.send_otp(data)

@otp_router.post("/resend-otp", response_model=OTPResponse)
async def resend_otp(
    data: PhoneRequest,
    service: OTPService = Depends(get_otp_service)
    ):
    return await service.resend_otp(data)

@otp_router.post("/verify-otp", response_model=MessageResponse)
async def verify_otp(
    data: VerifyOTPRequest,
    service: OTPService = Depends(get_otp_service)
    ):
    return await service.verify_otp(data)
