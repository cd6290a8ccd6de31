import pytest

from tests.conftest import find_user, find_type


@pytest.fixture
def paula(seeded_db, login_as):
    return login_as(find_user(seeded_db, "paula@eventflow.dev"))


@pytest.fixture
def catalog(seeded_db):
    oscar = find_user(seeded_db, "oscar@eventflow.dev")
    olga = find_user(seeded_db, "olga@eventflow.dev")
    workshop = find_type(seeded_db, "Workshop")
    conference = find_type(seeded_db, "Conferência")
    meetup = seeded_db.add(
        "events", title="Tech Meetup", description="Networking night", price=0,
        type_id=workshop["id"], organizer_id=oscar["id"],
    )
    summit = seeded_db.add(
        "events", title="Cloud Summit", description="Talks about infra", price=120.0,
        type_id=conference["id"], organizer_id=olga["id"],
    )
    hidden = seeded_db.add(
        "events", title="Private Dinner", price=10.0, status="inactive",
        type_id=workshop["id"], organizer_id=oscar["id"],
    )
    return {"meetup": meetup, "summit": summit, "hidden": hidden, "workshop": workshop}


def _rows(data):
    return {e["title"]: e for e in data["events"]}


def test_dashboard_lists_active_events_only(client, seeded_db, paula, catalog):
    data = client.get("/dashboard/participant").json()

    rows = _rows(data)
    assert set(rows) == {"Tech Meetup", "Cloud Summit"}
    assert rows["Tech Meetup"]["price_display"] == "R$ 0.00"
    assert rows["Tech Meetup"]["organizer_name"] == "Oscar Organizer"
    assert rows["Cloud Summit"]["type_name"] == "Conferência"
    assert data["filters"] == {"search": "", "type_id": "all"}
    assert data["registered_count"] == 0
    assert data["empty_message"] is None


def test_buy_free_ticket(client, seeded_db, paula, catalog):
    meetup = catalog["meetup"]
    before = _rows(client.get("/dashboard/participant").json())["Tech Meetup"]
    assert before["participant_count"] == 0
    assert before["action_label"] == "Comprar Ingresso"

    response = client.post(f"/dashboard/participant/events/{meetup['id']}/tickets")

    assert response.status_code == 201
    data = response.json()
    assert data["notice"]["title"] == "Ingresso adquirido!"
    row = _rows(data["dashboard"])["Tech Meetup"]
    assert row["participant_count"] == 1
    assert row["user_registered"] is True
    assert row["action_label"] == "Já Inscrito"
    assert data["dashboard"]["registered_count"] == 1
    registered = data["dashboard"]["registered_events"][0]
    assert registered["title"] == "Tech Meetup"
    assert registered["organizer_name"] == "Oscar Organizer"
    assert registered["type_name"] == "Workshop"


def test_second_purchase_is_refused(client, seeded_db, paula, catalog):
    meetup = catalog["meetup"]
    client.post(f"/dashboard/participant/events/{meetup['id']}/tickets")

    response = client.post(f"/dashboard/participant/events/{meetup['id']}/tickets")

    assert response.status_code == 409
    assert response.json()["detail"]["title"] == "Já inscrito"
    assert len(seeded_db.tables["tickets"]) == 1


def test_cannot_buy_inactive_or_missing_event(client, seeded_db, paula, catalog):
    assert client.post(f"/dashboard/participant/events/{catalog['hidden']['id']}/tickets").status_code == 404
    assert client.post("/dashboard/participant/events/nope/tickets").status_code == 404
    assert seeded_db.tables["tickets"] == []


def test_cancel_ticket(client, seeded_db, paula, catalog):
    meetup = catalog["meetup"]
    client.post(f"/dashboard/participant/events/{meetup['id']}/tickets")

    response = client.delete(f"/dashboard/participant/events/{meetup['id']}/tickets")

    assert response.status_code == 200
    assert response.json()["dashboard"]["registered_count"] == 0
    assert seeded_db.tables["tickets"] == []
    assert client.delete(f"/dashboard/participant/events/{meetup['id']}/tickets").status_code == 404


def test_search_matches_title_description_and_organizer(client, seeded_db, paula, catalog):
    def titles(search):
        data = client.get("/dashboard/participant", params={"search": search}).json()
        return sorted(_rows(data))

    assert titles("meetup") == ["Tech Meetup"]
    assert titles("INFRA") == ["Cloud Summit"]
    assert titles("olga") == ["Cloud Summit"]
    assert titles("organizer") == ["Cloud Summit", "Tech Meetup"]


def test_type_filter(client, seeded_db, paula, catalog):
    data = client.get("/dashboard/participant", params={"type_id": catalog["workshop"]["id"]}).json()
    assert list(_rows(data)) == ["Tech Meetup"]
    assert data["filters"]["type_id"] == catalog["workshop"]["id"]

    data = client.get("/dashboard/participant", params={"type_id": "all"}).json()
    assert len(data["events"]) == 2


def test_no_match_message(client, seeded_db, paula, catalog):
    data = client.get("/dashboard/participant", params={"search": "zzz"}).json()
    assert data["events"] == []
    assert data["empty_message"] == "Tente ajustar os filtros para encontrar eventos."


def test_no_events_message(client, seeded_db, paula):
    data = client.get("/dashboard/participant").json()
    assert data["empty_message"] == "Ainda não há eventos disponíveis. Volte em breve!"


def test_registered_events_outlive_deactivation(client, seeded_db, paula, catalog):
    summit = catalog["summit"]
    client.post(f"/dashboard/participant/events/{summit['id']}/tickets")
    seeded_db.get("events", summit["id"])["status"] = "inactive"

    data = client.get("/dashboard/participant").json()

    assert "Cloud Summit" not in _rows(data)
    assert [e["title"] for e in data["registered_events"]] == ["Cloud Summit"]
    assert data["registered_events"][0]["price_display"] == "R$ 120.00"


def test_organizer_created_event_reaches_participant(client, seeded_db, login_as):
    login_as(find_user(seeded_db, "oscar@eventflow.dev"))
    workshop = find_type(seeded_db, "Workshop")
    client.post(
        "/dashboard/organizer/events",
        json={"title": "Tech Meetup", "type_id": workshop["id"], "price": 0},
    )

    login_as(find_user(seeded_db, "paula@eventflow.dev"))
    row = _rows(client.get("/dashboard/participant").json())["Tech Meetup"]
    assert row["participant_count"] == 0

    data = client.post(f"/dashboard/participant/events/{row['id']}/tickets").json()["dashboard"]
    assert _rows(data)["Tech Meetup"]["participant_count"] == 1
    assert [e["title"] for e in data["registered_events"]] == ["Tech Meetup"]
