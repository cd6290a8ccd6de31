from supabase import Client
from eventflow.modules.stats.schemas import PlatformStats, OrganizerStats
from eventflow.core.notices import notice_error, error_message
from typing import Any, Dict, Optional


def _as_record(data: Any) -> Optional[Dict[str, Any]]:
    """RPCs return either a json object or a single-row set"""
    if isinstance(data, list):
        data = data[0] if data else None
    return data if isinstance(data, dict) else None


class StatsService:
    """Aggregates computed by Postgres functions; nothing is counted here."""

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_platform_stats(self) -> PlatformStats:
        try:
            result = self.supabase.rpc("get_platform_stats").execute()
            record = _as_record(result.data)
            return PlatformStats(**record) if record else PlatformStats()
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))

    def get_organizer_stats(self, organizer_id: str) -> OrganizerStats:
        try:
            result = self.supabase.rpc("get_organizer_stats", {"organizer_user_id": organizer_id}).execute()
            record = _as_record(result.data)
            return OrganizerStats(**record) if record else OrganizerStats()
        except Exception as e:
            raise notice_error(500, "Erro ao carregar dados", error_message(e))
