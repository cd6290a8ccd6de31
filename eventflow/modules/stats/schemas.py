from pydantic import BaseModel


class PlatformStats(BaseModel):
    total_users: int = 0
    total_organizers: int = 0
    total_participants: int = 0
    total_events: int = 0
    active_events: int = 0
    total_registrations: int = 0
    total_revenue: float = 0


class OrganizerStats(BaseModel):
    total_events: int = 0
    active_events: int = 0
    total_participants: int = 0
    total_revenue: float = 0
