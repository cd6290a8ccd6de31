from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from eventflow.core.notices import Notice
from eventflow.core.session import SessionUser
from eventflow.modules.stats.schemas import OrganizerStats
from eventflow.modules.event_types.schemas import EventTypeResponse


class OrganizerEventRow(BaseModel):
    id: str
    title: str
    description: str
    price: float
    price_display: str
    status: str
    status_label: str
    status_badge: str
    toggle_label: str
    type_id: Optional[str] = None
    type_name: str
    participant_count: int
    created_at: Optional[datetime] = None
    created_at_display: str


class OrganizerDashboard(BaseModel):
    user: SessionUser
    stats: OrganizerStats
    total_revenue_display: str
    average_revenue_per_event_display: str
    event_types: List[EventTypeResponse]
    events: List[OrganizerEventRow]
    empty_message: Optional[str] = None


class ParticipantRow(BaseModel):
    id: str
    name: str
    email: str
    registered_at: Optional[datetime] = None
    registered_at_display: str


class EventParticipantsPage(BaseModel):
    event_id: str
    event_title: str
    participants: List[ParticipantRow]


class OrganizerActionResponse(BaseModel):
    notice: Notice
    dashboard: OrganizerDashboard
