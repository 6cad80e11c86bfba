import logging
from fastapi import HTTPException
from pymongo.errors import PyMongoError
from phone_verify.core.errors import SERVER_ERROR_MESSAGE
from phone_verify.modules.otp.repository import OTPRepository
from phone_verify.modules.otp.models import OTPRecord, OTPState
from phone_verify.modules.otp.schemas import PhoneRequest, VerifyOTPRequest, OTPResponse
from phone_verify.modules.otp.utility import generate_otp
from phone_verify.modules.users.repository import UserRepository
from phone_verify.modules.users.schemas import MessageResponse
from phone_verify.modules.users.models import User

logger = logging.getLogger(__name__)


class OTPService:
    def __init__(self,
                 otp_repo: OTPRepository,
                 user_repo: UserRepository
                 ):
        self.otp_repo = otp_repo
        self.user_repo = user_repo

    async def send_otp(self, data: PhoneRequest) -> OTPResponse:
        if not data.phone:
            raise HTTPException(status_code=400, detail="Phone number is required")

        try:
            created = await self.user_repo.create_user_if_absent(User(phone=data.phone))
            if created:
                logger.info(f"User created for {data.phone}")
            else:
                logger.info(f"User already exists for {data.phone}")

            otp = await self._issue(data.phone)
        except PyMongoError as e:
            logger.error(f"Error in send_otp: {e}")
            raise HTTPException(status_code=500, detail=SERVER_ERROR_MESSAGE)

        return OTPResponse(message="OTP sent successfully", otp=otp)

    async def resend_otp(self, data: PhoneRequest) -> OTPResponse:
        if not data.phone:
            raise HTTPException(status_code=400, detail="Phone number is required")

        try:
            otp = await self._issue(data.phone)
        except PyMongoError as e:
            logger.error(f"Error in resend_otp: {e}")
            raise HTTPException(status_code=500, detail=SERVER_ERROR_MESSAGE)

        return OTPResponse(message="OTP resent successfully", otp=otp)

    async def verify_otp(self, data: VerifyOTPRequest) -> MessageResponse:
        if not data.phone or not data.otp:
            raise HTTPException(status_code=400, detail="Phone number and OTP are required")

        try:
            consumed = await self.otp_repo.consume_otp(data.phone, data.otp)
            state = OTPState.absent if consumed else await self.get_state(data.phone)
        except PyMongoError as e:
            logger.error(f"Error in verify_otp: {e}")
            raise HTTPException(status_code=500, detail=SERVER_ERROR_MESSAGE)

        if not consumed:
            if state == OTPState.absent:
                raise HTTPException(status_code=404, detail="OTP not found")
            # wrong guess, the pending record stays in place
            raise HTTPException(status_code=400, detail="Invalid OTP")

        logger.info(f"OTP verified for {data.phone}")
        return MessageResponse(message="OTP verified successfully")

    async def get_state(self, phone: str) -> OTPState:
        record = await self.otp_repo.find_otp(phone)
        return OTPState.pending if record else OTPState.absent

    async def _issue(self, phone: str) -> str:
        record = OTPRecord(phone=phone, otp=generate_otp())
        await self.otp_repo.upsert_otp(record)
        logger.info(f"OTP record stored for {phone}")
        logger.debug(f"OTP for {phone}: {record.otp}")
        return record.otp
