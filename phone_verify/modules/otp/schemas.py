from typing import Optional
from phone_verify.modules.users.schemas import MessageResponse, RequestBody


class PhoneRequest(RequestBody):
    phone: Optional[str] = None

class VerifyOTPRequest(RequestBody):
    phone: Optional[str] = None
    otp: Optional[str] = None

class OTPResponse(MessageResponse):
    otp: str  # returned until an SMS channel exists
