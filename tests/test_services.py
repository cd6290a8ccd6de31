from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException
from postgrest.exceptions import APIError

from eventflow.core.notices import error_message, notice_error
from eventflow.config import settings
from eventflow.database.supabase_client import SupabaseClient
from eventflow.modules.events.service import EventService
from eventflow.modules.participant.service import filter_events
from eventflow.modules.events.schemas import EventWithDetails
from eventflow.modules.stats.service import StatsService
from eventflow.modules.users.schemas import UserCreate
from eventflow.modules.users.service import UserService
from tests.conftest import find_user


def _rpc_returning(data):
    supabase = MagicMock()
    supabase.rpc.return_value.execute.return_value.data = data
    return supabase


class TestStatsService:
    def test_single_row_set(self):
        stats = StatsService(_rpc_returning([{"total_users": 7, "total_revenue": 12.5}])).get_platform_stats()
        assert stats.total_users == 7
        assert stats.total_revenue == 12.5

    def test_json_object(self):
        supabase = _rpc_returning({"total_events": 3, "active_events": 2})
        stats = StatsService(supabase).get_organizer_stats("org-1")
        assert stats.total_events == 3
        supabase.rpc.assert_called_once_with("get_organizer_stats", {"organizer_user_id": "org-1"})

    def test_no_data_means_zeros(self):
        stats = StatsService(_rpc_returning(None)).get_platform_stats()
        assert stats.total_users == 0
        assert stats.total_revenue == 0

    def test_error_becomes_notice(self):
        supabase = MagicMock()
        supabase.rpc.return_value.execute.side_effect = APIError({"message": "permission denied"})
        with pytest.raises(HTTPException) as exc_info:
            StatsService(supabase).get_platform_stats()
        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == {"title": "Erro ao carregar dados", "description": "permission denied"}


def test_error_message_prefers_backend_message():
    assert error_message(APIError({"message": "duplicate key"})) == "duplicate key"
    assert error_message(RuntimeError("boom")) == "boom"


def test_notice_error_shape():
    exc = notice_error(404, "Evento não encontrado")
    assert exc.status_code == 404
    assert exc.detail == {"title": "Evento não encontrado", "description": None}


def test_list_all_events_counts_each_event_separately(seeded_db):
    oscar = find_user(seeded_db, "oscar@eventflow.dev")
    first = seeded_db.add("events", title="A", price=1.0, organizer_id=oscar["id"])
    seeded_db.add("events", title="B", price=2.0, organizer_id=oscar["id"])
    seeded_db.add("tickets", event_id=first["id"], participant_id="p1")
    seeded_db.add("tickets", event_id=first["id"], participant_id="p2")

    events = EventService(seeded_db).list_all_events()

    assert [e.title for e in events] == ["B", "A"]
    assert [e.participant_count for e in events] == [0, 2]
    assert [e.organizer_name for e in events] == ["Oscar Organizer", "Oscar Organizer"]
    count_calls = [call for call in seeded_db.calls if call[0] == "tickets"]
    assert len(count_calls) == 2


def test_counts_are_keyed_by_event_whatever_the_pool_size(seeded_db, mocker):
    oscar = find_user(seeded_db, "oscar@eventflow.dev")
    events = [seeded_db.add("events", title=f"E{n}", price=0.0, organizer_id=oscar["id"]) for n in range(12)]
    for n, event in enumerate(events):
        for p in range(n % 4):
            seeded_db.add("tickets", event_id=event["id"], participant_id=f"p{p}")
    expected = {e["id"]: n % 4 for n, e in enumerate(events)}
    service = EventService(seeded_db)

    assert service.count_participants_by_event([e["id"] for e in events]) == expected
    mocker.patch.object(settings, "count_query_workers", 1)
    assert service.count_participants_by_event([e["id"] for e in events]) == expected
    assert service.count_participants_by_event([]) == {}


def test_failed_count_query_fails_the_listing(seeded_db):
    oscar = find_user(seeded_db, "oscar@eventflow.dev")
    seeded_db.add("events", title="A", price=1.0, organizer_id=oscar["id"])
    seeded_db.failures["tickets"] = APIError({"message": "statement timeout"})

    with pytest.raises(HTTPException) as exc_info:
        EventService(seeded_db).list_all_events()

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail["description"] == "statement timeout"


def test_missing_organizer_shows_placeholder(seeded_db):
    seeded_db.add("events", title="Orphan", price=0.0, organizer_id="gone")
    events = EventService(seeded_db).list_all_events()
    assert events[0].organizer_name == "N/A"


def test_create_user_drops_plan_for_non_organizers(seeded_db):
    service = UserService(seeded_db)
    user = service.create_user(UserCreate(name="Pat", email="pat@eventflow.dev", role="participant", plan_id="p-1"))
    assert user.plan_id is None


def test_get_user_by_email_unknown(seeded_db):
    assert UserService(seeded_db).get_user_by_email("nobody@eventflow.dev") is None


def test_filter_events_combines_search_and_type():
    events = [
        EventWithDetails(id="1", title="Python Day", type_id="t1", organizer_name="Oscar"),
        EventWithDetails(id="2", title="Python Night", type_id="t2", organizer_name="Olga"),
        EventWithDetails(id="3", title="Rust Day", type_id="t1", organizer_name="Oscar"),
    ]
    assert [e.id for e in filter_events(events, "python", "t1")] == ["1"]
    assert [e.id for e in filter_events(events, "", "all")] == ["1", "2", "3"]
    assert [e.id for e in filter_events(events, "oscar")] == ["1", "3"]


class TestSupabaseClient:
    def setup_method(self):
        SupabaseClient.reset_client()

    def teardown_method(self):
        SupabaseClient.reset_client()

    @pytest.fixture
    def configured(self, mocker):
        mocker.patch.object(settings, "supabase_url", "https://demo.supabase.co")
        mocker.patch.object(settings, "supabase_key", "anon-key")
        mocker.patch.object(settings, "supabase_service_role_key", None)
        return mocker.patch("eventflow.database.supabase_client.create_client")

    def test_client_is_built_once(self, configured):
        first = SupabaseClient.get_client()
        assert SupabaseClient.get_client() is first
        configured.assert_called_once_with("https://demo.supabase.co", "anon-key")

    def test_service_client_falls_back_to_anon_key(self, configured):
        assert SupabaseClient.get_service_client() is SupabaseClient.get_client()
        configured.assert_called_once_with("https://demo.supabase.co", "anon-key")

    def test_service_client_uses_service_key(self, configured, mocker):
        mocker.patch.object(settings, "supabase_service_role_key", "service-key")
        SupabaseClient.get_service_client()
        configured.assert_called_once_with("https://demo.supabase.co", "service-key")

    def test_missing_configuration(self, mocker):
        mocker.patch.object(settings, "supabase_url", "")
        create = mocker.patch("eventflow.database.supabase_client.create_client")
        with pytest.raises(ValueError, match="SUPABASE_URL and SUPABASE_KEY must be set"):
            SupabaseClient.get_client()
        create.assert_not_called()
