from supabase import Client
from eventflow.modules.events.schemas import EventCreate, EventUpdate, EventResponse, EventWithDetails
from eventflow.modules.plans.schemas import UNLIMITED_EVENTS
from eventflow.core.formatting import ACTIVE, toggled_status
from eventflow.core.notices import notice_error, error_message
from eventflow.config import settings
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
from concurrent.futures import ThreadPoolExecutor
import logging

logger = logging.getLogger(__name__)


def _embedded_name(row: Dict[str, Any], key: str) -> str:
    embedded = row.get(key)
    if isinstance(embedded, list):
        embedded = embedded[0] if embedded else None
    if embedded and embedded.get("name"):
        return embedded["name"]
    return "N/A"


class EventService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def count_participants(self, event_id: str) -> int:
        """Count-only query on tickets for one event"""
        result = self.supabase.table("tickets")\
            .select("*", count="exact", head=True)\
            .eq("event_id", event_id)\
            .execute()
        return result.count or 0

    def count_participants_by_event(self, event_ids: List[str]) -> Dict[str, int]:
        """One count query per event, issued concurrently; the first failure is re-raised"""
        if not event_ids:
            return {}
        workers = max(1, min(settings.count_query_workers, len(event_ids)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return dict(zip(event_ids, executor.map(self.count_participants, event_ids)))

    def count_events_by_organizer(self, organizer_id: str) -> int:
        result = self.supabase.table("events")\
            .select("*", count="exact", head=True)\
            .eq("organizer_id", organizer_id)\
            .execute()
        return result.count or 0

    def list_all_events(self) -> List[EventWithDetails]:
        """Every event with organizer name and participant count (one concurrent count query per event)"""
        try:
            result = self.supabase.table("events")\
                .select("id, title, description, price, status, type_id, organizer_id, created_at, organizer:users!organizer_id(name)")\
                .order("created_at", desc=True)\
                .execute()

            rows = result.data or []
            counts = self.count_participants_by_event([row["id"] for row in rows])
            return [
                EventWithDetails(
                    **{k: v for k, v in row.items() if k != "organizer"},
                    organizer_name=_embedded_name(row, "organizer"),
                    participant_count=counts[row["id"]],
                )
                for row in rows
            ]
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))

    def list_organizer_events(self, organizer_id: str) -> List[EventWithDetails]:
        """Events owned by an organizer with type name and ticket count"""
        try:
            result = self.supabase.table("events")\
                .select("*, event_types(name), tickets(id)")\
                .eq("organizer_id", organizer_id)\
                .order("created_at", desc=True)\
                .execute()

            return [
                EventWithDetails(
                    **{k: v for k, v in row.items() if k not in ("event_types", "tickets")},
                    type_name=_embedded_name(row, "event_types"),
                    participant_count=len(row.get("tickets") or []),
                )
                for row in result.data or []
            ]
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))

    def list_active_events(self, participant_id: Optional[str] = None) -> List[EventWithDetails]:
        """Active events with type, organizer, participant count and whether participant_id holds a ticket"""
        try:
            result = self.supabase.table("events")\
                .select("*, event_types(name), organizer:users!organizer_id(name), tickets(participant_id)")\
                .eq("status", ACTIVE)\
                .order("created_at", desc=True)\
                .execute()

            events = []
            for row in result.data or []:
                tickets = row.get("tickets") or []
                events.append(EventWithDetails(
                    **{k: v for k, v in row.items() if k not in ("event_types", "organizer", "tickets")},
                    type_name=_embedded_name(row, "event_types"),
                    organizer_name=_embedded_name(row, "organizer"),
                    participant_count=len(tickets),
                    user_registered=any(t.get("participant_id") == participant_id for t in tickets),
                ))
            return events
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))

    def list_featured_events(self, limit: int = 3) -> List[EventWithDetails]:
        """Most popular active events, by participant count"""
        try:
            result = self.supabase.table("events")\
                .select("id, title, description, price, status, type_id, created_at, event_types(name)")\
                .eq("status", ACTIVE)\
                .execute()

            rows = result.data or []
            counts = self.count_participants_by_event([row["id"] for row in rows])
            events = [
                EventWithDetails(
                    **{k: v for k, v in row.items() if k != "event_types"},
                    type_name=_embedded_name(row, "event_types"),
                    participant_count=counts[row["id"]],
                )
                for row in rows
            ]
            events.sort(key=lambda e: e.participant_count, reverse=True)
            return events[:limit]
        except Exception as e:
            logger.error(f"Error loading featured events: {e}")
            return []

    def get_event_by_id(self, event_id: str) -> EventResponse:
        try:
            result = self.supabase.table("events")\
                .select("*")\
                .eq("id", event_id)\
                .limit(1)\
                .execute()

            if not result.data:
                raise notice_error(404, "Evento não encontrado")

            return EventResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao carregar evento", error_message(e))

    def get_organizer_event(self, event_id: str, organizer_id: str) -> EventResponse:
        """Event owned by organizer_id; someone else's event is reported as not found"""
        event = self.get_event_by_id(event_id)
        if event.organizer_id != organizer_id:
            raise notice_error(404, "Evento não encontrado")
        return event

    def _check_plan_limit(self, organizer_id: str) -> None:
        user_result = self.supabase.table("users")\
            .select("plan_id")\
            .eq("id", organizer_id)\
            .limit(1)\
            .execute()
        plan_id = user_result.data[0].get("plan_id") if user_result.data else None
        if not plan_id:
            return

        plan_result = self.supabase.table("plans")\
            .select("name, max_events")\
            .eq("id", plan_id)\
            .limit(1)\
            .execute()
        if not plan_result.data:
            return

        max_events = plan_result.data[0]["max_events"]
        if max_events == UNLIMITED_EVENTS:
            return
        if self.count_events_by_organizer(organizer_id) >= max_events:
            raise notice_error(
                400,
                "Limite do plano atingido",
                f"Seu plano {plan_result.data[0]['name']} permite até {max_events} eventos.",
            )

    def create_event(self, event_data: EventCreate, organizer_id: str) -> EventResponse:
        """Create an event owned by organizer_id"""
        if not event_data.title.strip() or not event_data.type_id:
            raise notice_error(400, "Campos obrigatórios", "Preencha todos os campos obrigatórios.")
        try:
            self._check_plan_limit(organizer_id)

            result = self.supabase.table("events").insert({
                "title": event_data.title,
                "description": event_data.description or "",
                "type_id": event_data.type_id,
                "price": event_data.price,
                "organizer_id": organizer_id,
            }).execute()

            if not result.data:
                raise notice_error(500, "Erro ao criar evento", "Falha ao criar evento")

            logger.info(f"Organizer {organizer_id} created event {result.data[0]['id']}")
            return EventResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao criar evento", error_message(e))

    def update_event(self, event_id: str, event_data: EventUpdate) -> EventResponse:
        """Update event fields from the edit form"""
        if event_data.title is not None and not event_data.title.strip():
            raise notice_error(400, "Campos obrigatórios", "Preencha todos os campos obrigatórios.")
        try:
            update_data = {}
            if event_data.title:
                update_data["title"] = event_data.title
            if event_data.description is not None:
                update_data["description"] = event_data.description
            if event_data.type_id:
                update_data["type_id"] = event_data.type_id
            if event_data.price is not None:
                update_data["price"] = event_data.price

            if not update_data:
                raise notice_error(400, "Campos obrigatórios", "Preencha todos os campos obrigatórios.")

            result = self.supabase.table("events")\
                .update(update_data)\
                .eq("id", event_id)\
                .execute()

            if not result.data:
                raise notice_error(404, "Evento não encontrado")

            return EventResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao atualizar evento", error_message(e))

    def set_status(self, event_id: str, status: str) -> EventResponse:
        try:
            result = self.supabase.table("events")\
                .update({"status": status})\
                .eq("id", event_id)\
                .execute()

            if not result.data:
                raise notice_error(404, "Evento não encontrado")

            logger.info(f"Event {event_id} status set to {status}")
            return EventResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao atualizar status", error_message(e))

    def toggle_status(self, event_id: str) -> EventResponse:
        """active -> inactive, anything else -> active"""
        event = self.get_event_by_id(event_id)
        return self.set_status(event_id, toggled_status(event.status))

    def delete_event(self, event_id: str) -> bool:
        """Hard delete"""
        try:
            result = self.supabase.table("events")\
                .delete()\
                .eq("id", event_id)\
                .execute()

            if not result.data:
                raise notice_error(404, "Evento não encontrado")

            logger.info(f"Deleted event {event_id}")
            return True
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao excluir evento", error_message(e))
