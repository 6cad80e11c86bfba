from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime, timezone
from enum import Enum


class OTPState(str, Enum):
    pending = "pending"
    absent = "absent"

class OTPRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")
    phone: str
    otp: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
