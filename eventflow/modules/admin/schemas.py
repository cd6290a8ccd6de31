from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from eventflow.core.notices import Notice
from eventflow.core.session import SessionUser
from eventflow.modules.stats.schemas import PlatformStats
from eventflow.modules.event_types.schemas import EventTypeResponse


class AdminUserRow(BaseModel):
    id: str
    name: str
    email: str
    role: str
    role_label: str
    role_badge: str
    active: bool
    status_label: str
    status_badge: str
    toggle_label: str
    can_toggle: bool
    created_at: Optional[datetime] = None
    created_at_display: str


class AdminEventRow(BaseModel):
    id: str
    title: str
    description: str
    price: float
    price_display: str
    status: str
    status_label: str
    status_badge: str
    toggle_label: str
    organizer_name: str
    participant_count: int
    created_at: Optional[datetime] = None
    created_at_display: str


class AdminPlanRow(BaseModel):
    id: str
    name: str
    max_events: int
    max_events_label: str
    price: float
    price_display: str
    created_at: Optional[datetime] = None


class AdminSummary(BaseModel):
    active_users: int
    active_events: int
    active_event_rate: int
    average_participants_per_event: int
    average_revenue_per_event: float
    average_revenue_per_event_display: str
    total_revenue_display: str


class AdminDashboard(BaseModel):
    user: SessionUser
    stats: PlatformStats
    users: List[AdminUserRow]
    events: List[AdminEventRow]
    plans: List[AdminPlanRow]
    event_types: List[EventTypeResponse]
    summary: AdminSummary


class AdminActionResponse(BaseModel):
    notice: Notice
    dashboard: AdminDashboard
