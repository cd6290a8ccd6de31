from pydantic import BaseModel
from typing import Optional, List
from eventflow.core.session import SessionUser


class FeaturedEvent(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    price: float
    price_display: str
    type_name: str
    participant_count: int


class HomePage(BaseModel):
    title: str
    tagline: str
    user: Optional[SessionUser] = None
    dashboard_path: Optional[str] = None
    featured_events: List[FeaturedEvent]


class NotFoundPage(BaseModel):
    path: str
    message: str
    home_path: str = "/"
