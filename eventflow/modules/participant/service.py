from supabase import Client
from eventflow.modules.participant.schemas import (
    ParticipantDashboard, AvailableEventRow, RegisteredEventRow, EventFilters
)
from eventflow.modules.events.schemas import EventWithDetails
from eventflow.modules.events.service import EventService
from eventflow.modules.event_types.service import EventTypeService
from eventflow.modules.tickets.schemas import RegisteredEvent, TicketResponse
from eventflow.modules.tickets.service import TicketService
from eventflow.core.formatting import format_currency, format_datetime
from eventflow.core.session import SessionUser
from typing import List, Optional

ALL_TYPES = "all"
NO_MATCH_MESSAGE = "Tente ajustar os filtros para encontrar eventos."
NO_EVENTS_MESSAGE = "Ainda não há eventos disponíveis. Volte em breve!"


def filter_events(events: List[EventWithDetails], search: str = "", type_id: Optional[str] = None) -> List[EventWithDetails]:
    """Case-insensitive search over title, description and organizer name, then type filter"""
    filtered = list(events)
    if search:
        term = search.lower()
        filtered = [
            e for e in filtered
            if term in e.title.lower()
            or term in (e.description or "").lower()
            or term in e.organizer_name.lower()
        ]
    if type_id and type_id != ALL_TYPES:
        filtered = [e for e in filtered if e.type_id == type_id]
    return filtered


class ParticipantDashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.events = EventService(supabase)
        self.event_types = EventTypeService(supabase)
        self.tickets = TicketService(supabase)

    def get_dashboard(self, participant: SessionUser, search: str = "", type_id: Optional[str] = None) -> ParticipantDashboard:
        filters = EventFilters(search=search or "", type_id=type_id or ALL_TYPES)
        event_types = self.event_types.list_event_types()
        events = self.events.list_active_events(participant.id)
        registered = self.tickets.list_registered_events(participant.id)

        filtered = filter_events(events, filters.search, filters.type_id)
        empty_message = None
        if not filtered:
            has_filters = bool(filters.search) or filters.type_id != ALL_TYPES
            empty_message = NO_MATCH_MESSAGE if has_filters else NO_EVENTS_MESSAGE

        return ParticipantDashboard(
            user=participant,
            filters=filters,
            event_types=event_types,
            events=[self._available_row(e) for e in filtered],
            registered_events=[self._registered_row(r) for r in registered],
            registered_count=len(registered),
            empty_message=empty_message,
        )

    def buy_ticket(self, participant: SessionUser, event_id: str) -> TicketResponse:
        return self.tickets.buy_ticket(event_id, participant.id)

    def cancel_ticket(self, participant: SessionUser, event_id: str) -> bool:
        return self.tickets.cancel_ticket(event_id, participant.id)

    @staticmethod
    def _available_row(event: EventWithDetails) -> AvailableEventRow:
        return AvailableEventRow(
            id=event.id,
            title=event.title,
            description=event.description or "",
            price=event.price,
            price_display=format_currency(event.price),
            type_id=event.type_id,
            type_name=event.type_name,
            organizer_name=event.organizer_name,
            participant_count=event.participant_count,
            user_registered=event.user_registered,
            action_label="Já Inscrito" if event.user_registered else "Comprar Ingresso",
            created_at=event.created_at,
        )

    @staticmethod
    def _registered_row(event: RegisteredEvent) -> RegisteredEventRow:
        return RegisteredEventRow(
            id=event.id,
            title=event.title,
            description=event.description or "",
            price=event.price,
            price_display=format_currency(event.price),
            type_name=event.type_name,
            organizer_name=event.organizer_name,
            registered_at=event.registered_at,
            registered_at_display=format_datetime(event.registered_at),
        )
