from supabase import Client
from eventflow.modules.organizer.schemas import (
    OrganizerDashboard, OrganizerEventRow, EventParticipantsPage, ParticipantRow
)
from eventflow.modules.events.schemas import EventCreate, EventUpdate, EventResponse, EventWithDetails
from eventflow.modules.events.service import EventService
from eventflow.modules.event_types.service import EventTypeService
from eventflow.modules.stats.service import StatsService
from eventflow.modules.tickets.service import TicketService
from eventflow.core.formatting import (
    ACTIVE, status_label, status_badge_variant, toggle_label, format_currency, format_date, format_datetime
)
from eventflow.core.session import SessionUser

EMPTY_EVENTS_MESSAGE = 'Você ainda não criou nenhum evento. Clique em "Novo Evento" para começar!'


class OrganizerDashboardService:
    """Everything here is scoped to the organizer's own events."""

    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.events = EventService(supabase)
        self.event_types = EventTypeService(supabase)
        self.stats = StatsService(supabase)
        self.tickets = TicketService(supabase)

    def get_dashboard(self, organizer: SessionUser) -> OrganizerDashboard:
        stats = self.stats.get_organizer_stats(organizer.id)
        event_types = self.event_types.list_event_types()
        events = self.events.list_organizer_events(organizer.id)

        average_revenue = stats.total_revenue / stats.total_events if stats.total_events > 0 else 0.0
        return OrganizerDashboard(
            user=organizer,
            stats=stats,
            total_revenue_display=format_currency(stats.total_revenue),
            average_revenue_per_event_display=format_currency(average_revenue),
            event_types=event_types,
            events=[self._event_row(e) for e in events],
            empty_message=None if events else EMPTY_EVENTS_MESSAGE,
        )

    def create_event(self, organizer: SessionUser, event_data: EventCreate) -> EventResponse:
        return self.events.create_event(event_data, organizer.id)

    def update_event(self, organizer: SessionUser, event_id: str, event_data: EventUpdate) -> EventResponse:
        self.events.get_organizer_event(event_id, organizer.id)
        return self.events.update_event(event_id, event_data)

    def toggle_event_status(self, organizer: SessionUser, event_id: str) -> EventResponse:
        self.events.get_organizer_event(event_id, organizer.id)
        return self.events.toggle_status(event_id)

    def delete_event(self, organizer: SessionUser, event_id: str) -> bool:
        self.events.get_organizer_event(event_id, organizer.id)
        return self.events.delete_event(event_id)

    def get_participants(self, organizer: SessionUser, event_id: str) -> EventParticipantsPage:
        event = self.events.get_organizer_event(event_id, organizer.id)
        participants = self.tickets.list_event_participants(event_id)
        return EventParticipantsPage(
            event_id=event.id,
            event_title=event.title,
            participants=[
                ParticipantRow(
                    id=p.id,
                    name=p.name,
                    email=p.email,
                    registered_at=p.registered_at,
                    registered_at_display=format_datetime(p.registered_at),
                )
                for p in participants
            ],
        )

    @staticmethod
    def _event_row(event: EventWithDetails) -> OrganizerEventRow:
        is_active = event.status == ACTIVE
        return OrganizerEventRow(
            id=event.id,
            title=event.title,
            description=event.description or "",
            price=event.price,
            price_display=format_currency(event.price),
            status=event.status,
            status_label=status_label(is_active),
            status_badge=status_badge_variant(is_active),
            toggle_label=toggle_label(is_active),
            type_id=event.type_id,
            type_name=event.type_name,
            participant_count=event.participant_count,
            created_at=event.created_at,
            created_at_display=format_date(event.created_at),
        )
