from supabase import Client
from eventflow.modules.home.schemas import HomePage, FeaturedEvent
from eventflow.modules.events.service import EventService
from eventflow.core.dependencies import dashboard_path
from eventflow.core.formatting import format_currency
from eventflow.core.session import SessionUser
from eventflow.config import settings
from typing import Optional

TAGLINE = "A plataforma completa para organizar e participar dos melhores eventos"


class HomeService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.events = EventService(supabase)

    def get_home_page(self, user: Optional[SessionUser] = None) -> HomePage:
        featured = self.events.list_featured_events(limit=settings.featured_events_limit)
        return HomePage(
            title="EventFlow",
            tagline=TAGLINE,
            user=user,
            dashboard_path=dashboard_path(user.role) if user else None,
            featured_events=[
                FeaturedEvent(
                    id=event.id,
                    title=event.title,
                    description=event.description,
                    price=event.price,
                    price_display=format_currency(event.price),
                    type_name=event.type_name,
                    participant_count=event.participant_count,
                )
                for event in featured
            ],
        )
