from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from eventflow.core.notices import Notice
from eventflow.core.session import SessionUser
from eventflow.modules.event_types.schemas import EventTypeResponse


class AvailableEventRow(BaseModel):
    id: str
    title: str
    description: str
    price: float
    price_display: str
    type_id: Optional[str] = None
    type_name: str
    organizer_name: str
    participant_count: int
    user_registered: bool
    action_label: str
    created_at: Optional[datetime] = None


class RegisteredEventRow(BaseModel):
    id: str
    title: str
    description: str
    price: float
    price_display: str
    type_name: str
    organizer_name: str
    registered_at: Optional[datetime] = None
    registered_at_display: str


class EventFilters(BaseModel):
    search: str = ""
    type_id: str = "all"


class ParticipantDashboard(BaseModel):
    user: SessionUser
    filters: EventFilters
    event_types: List[EventTypeResponse]
    events: List[AvailableEventRow]
    registered_events: List[RegisteredEventRow]
    registered_count: int
    empty_message: Optional[str] = None


class ParticipantActionResponse(BaseModel):
    notice: Notice
    dashboard: ParticipantDashboard
