from pydantic import BaseModel
from typing import Optional
from datetime import datetime

UNLIMITED_EVENTS = -1


class PlanCreate(BaseModel):
    name: str
    max_events: int
    price: float


class PlanUpdate(BaseModel):
    name: Optional[str] = None
    max_events: Optional[int] = None
    price: Optional[float] = None


class PlanResponse(BaseModel):
    id: str
    name: str
    max_events: int
    price: float
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
