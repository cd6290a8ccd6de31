import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from eventflow.core.session import encode_session
from eventflow.database.supabase_client import get_supabase
from eventflow.main import app

# (table, embedded table) -> (local column, remote column, to-many)
RELATIONS = {
    ("events", "users"): ("organizer_id", "id", False),
    ("events", "event_types"): ("type_id", "id", False),
    ("events", "tickets"): ("id", "event_id", True),
    ("tickets", "users"): ("participant_id", "id", False),
    ("tickets", "events"): ("event_id", "id", False),
}

DEFAULTS = {
    "users": {"active": True, "plan_id": None},
    "events": {"status": "active", "description": ""},
}


def _split_top_level(text):
    parts, depth, current = [], 0, ""
    for ch in text:
        if ch == "," and depth == 0:
            parts.append(current.strip())
            current = ""
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        current += ch
    if current.strip():
        parts.append(current.strip())
    return parts


def _parse_columns(text):
    """Parse a PostgREST select string: columns, '*' and [alias:]table[!hint](...) embeds."""
    fields = []
    for part in _split_top_level(text):
        if "(" in part:
            head, inner = part.split("(", 1)
            alias = None
            if ":" in head:
                alias, head = head.split(":", 1)
            table, _, hint = head.partition("!")
            fields.append(("embed", alias or table, table, hint == "inner", _parse_columns(inner[:-1])))
        else:
            fields.append(("column", part))
    return fields


class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.operation = "select"
        self.columns = "*"
        self.count = None
        self.head = False
        self.filters = []
        self.orders = []
        self.limit_value = None
        self.payload = None

    def select(self, *columns, count=None, head=None):
        self.operation = "select"
        self.columns = ", ".join(columns) if columns else "*"
        self.count = count
        self.head = bool(head)
        return self

    def insert(self, payload):
        self.operation = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.operation = "update"
        self.payload = payload
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, value):
        self.limit_value = value
        return self

    def _matching(self):
        return [
            row for row in self.db.tables[self.table]
            if all(row.get(column) == value for column, value in self.filters)
        ]

    def execute(self):
        self.db.calls.append((self.table, self.operation, list(self.filters)))
        if self.table in self.db.failures:
            raise self.db.failures[self.table]
        return getattr(self, f"_execute_{self.operation}")()

    def _execute_select(self):
        rows = self._matching()
        for column, desc in reversed(self.orders):
            rows = sorted(rows, key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
        fields = _parse_columns(self.columns)
        projected = []
        for row in rows:
            out = self.db.project(self.table, row, fields)
            inner_keys = [f[1] for f in fields if f[0] == "embed" and f[3]]
            if all(out.get(key) for key in inner_keys):
                projected.append(out)
        if self.limit_value is not None:
            projected = projected[:self.limit_value]
        count = len(projected) if self.count else None
        return FakeResponse([] if self.head else projected, count)

    def _execute_insert(self):
        payload = self.payload if isinstance(self.payload, list) else [self.payload]
        inserted = [self.db.add(self.table, **row) for row in payload]
        return FakeResponse([dict(r) for r in inserted])

    def _execute_update(self):
        rows = self._matching()
        for row in rows:
            row.update(self.payload)
        return FakeResponse([dict(r) for r in rows])

    def _execute_delete(self):
        rows = self._matching()
        self.db.tables[self.table] = [r for r in self.db.tables[self.table] if r not in rows]
        return FakeResponse([dict(r) for r in rows])


class FakeRpc:
    def __init__(self, db, name, params):
        self.db = db
        self.name = name
        self.params = params

    def execute(self):
        self.db.calls.append(("rpc", self.name, self.params))
        if self.name in self.db.failures:
            raise self.db.failures[self.name]
        return FakeResponse(self.db.functions[self.name](**self.params))


class FakeSupabase:
    """In-memory stand-in for the Supabase client: tables, embeds, count queries and the two stats RPCs."""

    def __init__(self):
        self.tables = {name: [] for name in ("users", "plans", "event_types", "events", "tickets")}
        self.calls = []
        self.failures = {}
        self._clock = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
        self.functions = {
            "get_platform_stats": self._platform_stats,
            "get_organizer_stats": self._organizer_stats,
        }

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params=None):
        return FakeRpc(self, name, params or {})

    def add(self, table, **values):
        self._clock += timedelta(minutes=1)
        row = {"id": str(uuid.uuid4()), "created_at": self._clock.isoformat()}
        row.update(DEFAULTS.get(table, {}))
        row.update(values)
        self.tables[table].append(row)
        return row

    def get(self, table, row_id):
        return next((r for r in self.tables[table] if r["id"] == row_id), None)

    def project(self, table, row, fields):
        out = {}
        for field in fields:
            if field[0] == "column":
                if field[1] == "*":
                    out.update(row)
                else:
                    out[field[1]] = row.get(field[1])
                continue
            _, key, embedded_table, _, sub_fields = field
            local, remote, many = RELATIONS[(table, embedded_table)]
            matches = [r for r in self.tables[embedded_table] if r.get(remote) == row.get(local)]
            if many:
                out[key] = [self.project(embedded_table, m, sub_fields) for m in matches]
            else:
                out[key] = self.project(embedded_table, matches[0], sub_fields) if matches else None
        return out

    def _revenue(self, events):
        prices = {e["id"]: e["price"] for e in events}
        return sum(prices[t["event_id"]] for t in self.tables["tickets"] if t["event_id"] in prices)

    def _platform_stats(self):
        users = self.tables["users"]
        events = self.tables["events"]
        return {
            "total_users": len(users),
            "total_organizers": len([u for u in users if u["role"] == "organizer"]),
            "total_participants": len([u for u in users if u["role"] == "participant"]),
            "total_events": len(events),
            "active_events": len([e for e in events if e["status"] == "active"]),
            "total_registrations": len(self.tables["tickets"]),
            "total_revenue": self._revenue(events),
        }

    def _organizer_stats(self, organizer_user_id):
        events = [e for e in self.tables["events"] if e["organizer_id"] == organizer_user_id]
        event_ids = {e["id"] for e in events}
        return {
            "total_events": len(events),
            "active_events": len([e for e in events if e["status"] == "active"]),
            "total_participants": len([t for t in self.tables["tickets"] if t["event_id"] in event_ids]),
            "total_revenue": self._revenue(events),
        }


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def seeded_db(fake_db):
    """Plans, event types and one user per role"""
    basic = fake_db.add("plans", name="Básico", max_events=2, price=0.0)
    premium = fake_db.add("plans", name="Premium", max_events=-1, price=149.9)
    fake_db.add("event_types", name="Workshop")
    fake_db.add("event_types", name="Conferência")
    fake_db.add("users", name="Alice Admin", email="admin@eventflow.dev", role="admin")
    fake_db.add("users", name="Oscar Organizer", email="oscar@eventflow.dev", role="organizer", plan_id=basic["id"])
    fake_db.add("users", name="Olga Organizer", email="olga@eventflow.dev", role="organizer", plan_id=premium["id"])
    fake_db.add("users", name="Paula Participant", email="paula@eventflow.dev", role="participant")
    return fake_db


def find_user(db, email):
    return next(u for u in db.tables["users"] if u["email"] == email)


def find_type(db, name):
    return next(t for t in db.tables["event_types"] if t["name"] == name)


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_supabase] = lambda: fake_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(client):
    """Store a users row as the session cookie, the way POST /login does"""
    def _login(user_row):
        client.cookies.set("eventflow_user", encode_session(user_row))
        return user_row
    return _login
