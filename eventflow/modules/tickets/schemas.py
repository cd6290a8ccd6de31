from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class TicketResponse(BaseModel):
    id: str
    event_id: str
    participant_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RegisteredEvent(BaseModel):
    """An event the participant holds a ticket for"""
    id: str
    title: str
    description: Optional[str] = None
    price: float = 0
    type_name: str = "N/A"
    organizer_name: str = "N/A"
    registered_at: Optional[datetime] = None


class EventParticipant(BaseModel):
    id: str
    name: str
    email: str
    registered_at: Optional[datetime] = None
