from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class EventCreate(BaseModel):
    title: str
    description: Optional[str] = ""
    type_id: str
    price: float


class EventUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    type_id: Optional[str] = None
    price: Optional[float] = None


class EventResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    price: float = 0
    status: str = "active"
    type_id: Optional[str] = None
    organizer_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EventWithDetails(EventResponse):
    """Event joined with its type, organizer and ticket data"""
    type_name: str = "N/A"
    organizer_name: str = "N/A"
    participant_count: int = 0
    user_registered: bool = False
