from pydantic import BaseModel, ConfigDict
from typing import Optional


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class RequestBody(BaseModel):
    # clients send phones and codes as JSON numbers too
    model_config = ConfigDict(coerce_numbers_to_str=True)


class UserDetailsRequest(RequestBody):
    # fields stay optional here so the service can answer with its own 400
    phone: Optional[str] = None
    name: Optional[str] = None
    dob: Optional[str] = None
    gender: Optional[str] = None
