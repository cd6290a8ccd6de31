from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime

Role = Literal["admin", "organizer", "participant"]


class UserCreate(BaseModel):
    name: str
    email: str
    role: Role
    plan_id: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    active: bool = True
    plan_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
