from supabase import Client
from eventflow.modules.event_types.schemas import EventTypeCreate, EventTypeResponse
from eventflow.core.notices import notice_error, error_message
from typing import List
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class EventTypeService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_event_types(self) -> List[EventTypeResponse]:
        """All event types ordered by name"""
        try:
            result = self.supabase.table("event_types")\
                .select("*")\
                .order("name")\
                .execute()
            return [EventTypeResponse(**event_type) for event_type in result.data or []]
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))

    def create_event_type(self, event_type_data: EventTypeCreate) -> EventTypeResponse:
        name = event_type_data.name.strip()
        if not name:
            raise notice_error(400, "Campos obrigatórios", "Informe o nome do tipo de evento.")
        try:
            result = self.supabase.table("event_types").insert({"name": name}).execute()

            if not result.data:
                raise notice_error(500, "Erro", "Falha ao criar tipo de evento")

            logger.info(f"Created event type {name}")
            return EventTypeResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro", error_message(e))

    def delete_event_type(self, event_type_id: str) -> bool:
        try:
            result = self.supabase.table("event_types")\
                .delete()\
                .eq("id", event_type_id)\
                .execute()

            if not result.data:
                raise notice_error(404, "Tipo de evento não encontrado")

            return True
        except HTTPException:
            raise
        except Exception as e:
            raise notice_error(500, "Erro", error_message(e))
