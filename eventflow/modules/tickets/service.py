from supabase import Client
from eventflow.modules.tickets.schemas import TicketResponse, RegisteredEvent, EventParticipant
from eventflow.core.formatting import ACTIVE
from eventflow.core.notices import notice_error, error_message
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class TicketService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_ticket(self, event_id: str, participant_id: str) -> Optional[TicketResponse]:
        result = self.supabase.table("tickets")\
            .select("*")\
            .eq("event_id", event_id)\
            .eq("participant_id", participant_id)\
            .limit(1)\
            .execute()
        if not result.data:
            return None
        return TicketResponse(**result.data[0])

    def buy_ticket(self, event_id: str, participant_id: str) -> TicketResponse:
        """Register the participant for an active event, at most once.

        The existence check and the insert are two round-trips; only a unique
        constraint in the database closes the gap between them.
        """
        try:
            event_result = self.supabase.table("events")\
                .select("id, status")\
                .eq("id", event_id)\
                .limit(1)\
                .execute()
            if not event_result.data or event_result.data[0].get("status") != ACTIVE:
                raise notice_error(404, "Evento não encontrado", "Este evento não está disponível.")

            if self.find_ticket(event_id, participant_id):
                raise notice_error(409, "Já inscrito", "Você já possui um ingresso para este evento.")

            result = self.supabase.table("tickets").insert({
                "event_id": event_id,
                "participant_id": participant_id,
            }).execute()

            if not result.data:
                raise notice_error(500, "Erro ao comprar ingresso", "Falha ao criar ingresso")

            logger.info(f"Participant {participant_id} registered for event {event_id}")
            return TicketResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao comprar ingresso", error_message(e))

    def cancel_ticket(self, event_id: str, participant_id: str) -> bool:
        """Remove the participant's ticket for an event"""
        try:
            result = self.supabase.table("tickets")\
                .delete()\
                .eq("event_id", event_id)\
                .eq("participant_id", participant_id)\
                .execute()

            if not result.data:
                raise notice_error(404, "Inscrição não encontrada", "Você não possui ingresso para este evento.")

            logger.info(f"Participant {participant_id} unregistered from event {event_id}")
            return True
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro ao cancelar inscrição", error_message(e))

    def list_registered_events(self, participant_id: str) -> List[RegisteredEvent]:
        """Events the participant holds tickets for, most recent ticket first"""
        try:
            result = self.supabase.table("tickets")\
                .select("created_at, events!inner(id, title, description, price, event_types(name), organizer:users!organizer_id(name))")\
                .eq("participant_id", participant_id)\
                .order("created_at", desc=True)\
                .execute()

            registered = []
            for ticket in result.data or []:
                event = ticket.get("events") or {}
                registered.append(RegisteredEvent(
                    id=event["id"],
                    title=event["title"],
                    description=event.get("description"),
                    price=event.get("price") or 0,
                    type_name=(event.get("event_types") or {}).get("name") or "N/A",
                    organizer_name=(event.get("organizer") or {}).get("name") or "N/A",
                    registered_at=ticket.get("created_at"),
                ))
            return registered
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))

    def list_event_participants(self, event_id: str) -> List[EventParticipant]:
        """Participants holding a ticket for the event, most recent first"""
        try:
            result = self.supabase.table("tickets")\
                .select("created_at, participant:users!participant_id(id, name, email)")\
                .eq("event_id", event_id)\
                .order("created_at", desc=True)\
                .execute()

            return [
                EventParticipant(
                    id=ticket["participant"]["id"],
                    name=ticket["participant"]["name"],
                    email=ticket["participant"]["email"],
                    registered_at=ticket.get("created_at"),
                )
                for ticket in result.data or []
                if ticket.get("participant")
            ]
        except Exception as e:
            raise notice_error(500, "Erro ao carregar participantes", error_message(e))
