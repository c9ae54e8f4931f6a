from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class WaitlistJoinRequest(BaseModel):
    email: EmailStr
    source: Optional[str] = Field(default=None, max_length=100)


class WaitlistEntryResponse(BaseModel):
    id: int
    email: str
    source: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class WaitlistJoinResponse(BaseModel):
    message: str
    data: WaitlistEntryResponse


class WaitlistStatusResponse(BaseModel):
    message: str
