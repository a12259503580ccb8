import copy
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from jobsadmin import create_app
from jobsadmin.services.backend import AuthError, BackendError, NotFound


ADMIN = {
    "id": "admin-1",
    "email": "admin@example.com",
    "created_at": "2024-01-01T00:00:00+00:00",
    "user_metadata": {"name": "Ada Admin"},
}


def _compare(op, left, right):
    if op == "eq":
        return left == right
    if op == "neq":
        return left != right
    if op == "is":
        return left is right
    if op == "in":
        return left in right
    if left is None:
        return False
    if op == "lt":
        return left < right
    if op == "lte":
        return left <= right
    if op == "gt":
        return left > right
    if op == "gte":
        return left >= right
    raise ValueError(op)


class FakeBackend:
    """In-memory stand-in for BackendClient.

    ``fail`` maps ``(method, table)`` to an exception raised on that call.
    """

    def __init__(self, tables=None):
        self.tables = {k: [dict(r) for r in v] for k, v in (tables or {}).items()}
        self.fail = {}
        self.calls = []
        self.password = "secret-pass"
        self.token = "token-123"

    def _check(self, method, table):
        self.calls.append((method, table))
        exc = self.fail.get((method, table))
        if exc:
            raise exc

    def _rows(self, table, filters):
        rows = self.tables.get(table, [])
        for col, op, val in filters:
            rows = [r for r in rows if _compare(op, r.get(col), val)]
        return rows

    def _join(self, row):
        row = dict(row)
        job = next((j for j in self.tables.get("jobs", []) if j["id"] == row.get("job_id")), None)
        person = next((f for f in self.tables.get("freelancers", []) if f["id"] == row.get("applicant_id")), None)
        row["jobs"] = copy.deepcopy(job)
        row["freelancers"] = copy.deepcopy(person)
        return row

    def _project(self, row, columns):
        if columns == "*":
            return dict(row)
        if columns.startswith("*,"):
            return self._join(row)
        wanted = [c.strip() for c in columns.split(",")]
        return {c: row.get(c) for c in wanted}

    def select(self, table, columns="*", filters=(), order=None, ascending=False, limit=None):
        self._check("select", table)
        rows = self._rows(table, filters)
        if order:
            rows = sorted(rows, key=lambda r: r.get(order) or "", reverse=not ascending)
        if limit is not None:
            rows = rows[:limit]
        return [self._project(r, columns) for r in rows]

    def get(self, table, row_id, columns="*"):
        rows = self.select(table, columns=columns, filters=[("id", "eq", row_id)], limit=1)
        return rows[0] if rows else None

    def count(self, table, filters=()):
        self._check("count", table)
        return len(self._rows(table, filters))

    def update(self, table, row_id, fields, columns="*"):
        self._check("update", table)
        for row in self.tables.get(table, []):
            if row["id"] == row_id:
                row.update(fields)
                return self._project(row, columns)
        raise NotFound(f"{table} row {row_id} not found", status=404)

    def sign_in_with_password(self, email, password):
        self._check("sign_in", "auth")
        if email != ADMIN["email"] or password != self.password:
            raise AuthError("Invalid login credentials", status=400)
        return {"access_token": self.token, "refresh_token": "r", "user": dict(ADMIN)}

    def get_user(self, access_token):
        self._check("get_user", "auth")
        if access_token != self.token:
            raise AuthError("invalid JWT", status=401)
        return dict(ADMIN)

    def sign_out(self, access_token):
        self._check("sign_out", "auth")

    def row(self, table, row_id):
        return next(r for r in self.tables[table] if r["id"] == row_id)


def make_tables():
    return {
        "employers": [
            {"id": "c1", "name": "Acme", "is_verified": False, "request_verify": True,
             "hiring_rate": 40, "created_at": "2024-03-01T00:00:00+00:00", "updated_at": "2024-03-01T00:00:00+00:00"},
            {"id": "c2", "name": "Globex", "is_verified": True, "request_verify": False,
             "hiring_rate": 55, "created_at": "2024-05-01T00:00:00+00:00", "updated_at": "2024-05-01T00:00:00+00:00"},
            {"id": "c3", "name": "Initech", "is_verified": False, "request_verify": None,
             "hiring_rate": None, "created_at": "2024-04-01T00:00:00+00:00", "updated_at": "2024-04-01T00:00:00+00:00"},
        ],
        "jobs": [
            {"id": "j1", "job_title": "Backend Engineer", "company": "Acme", "company_id": "c1",
             "status": "active", "created_at": "2024-06-01T00:00:00+00:00"},
            {"id": "j2", "job_title": "Designer", "company": "Acme", "company_id": "c1",
             "status": "closed", "created_at": "2024-06-10T00:00:00+00:00"},
            {"id": "j3", "job_title": "Orphan", "company": None, "company_id": None,
             "status": "draft", "created_at": "2024-06-12T00:00:00+00:00"},
        ],
        "applications": [
            {"id": "a1", "job_id": "j1", "applicant_id": "f1", "status": "hired",
             "cover_later": "Hello", "created_at": "2024-06-02T00:00:00+00:00"},
            {"id": "a2", "job_id": "j1", "applicant_id": "f2", "status": "rejected",
             "created_at": "2024-06-03T00:00:00+00:00"},
            {"id": "a3", "job_id": "j2", "applicant_id": "f1", "status": "pending",
             "created_at": "2024-06-11T00:00:00+00:00"},
            {"id": "a4", "job_id": "j3", "applicant_id": "f2", "status": "pending",
             "created_at": "2024-06-13T00:00:00+00:00"},
        ],
        "freelancers": [
            {"id": "f1", "full_name": "Grace Hopper", "email": "grace@example.com",
             "professional_title": "Compiler Engineer", "location": "Arlington",
             "profile_completion": 90, "created_at": "2024-02-01T00:00:00+00:00"},
            {"id": "f2", "first_name": "Alan", "last_name": "Turing", "email": "alan@example.com",
             "professional_title": "Mathematician", "location": "London",
             "profile_completion": 60, "created_at": "2024-06-01T00:00:00+00:00"},
            {"id": "f3", "full_name": "Nobody", "email": None, "location": "  ",
             "profile_completion": None, "created_at": "2024-06-05T00:00:00+00:00"},
        ],
    }


@pytest.fixture
def fake_backend():
    return FakeBackend(make_tables())


@pytest.fixture
def app(fake_backend):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "WTF_CSRF_ENABLED": False,
        "REDIS_URL": "",
        "HIRING_RATE_ASYNC": True,
    })
    app.extensions["backend"] = fake_backend
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client, fake_backend):
    resp = client.post("/auth/login", data={"email": ADMIN["email"], "password": fake_backend.password})
    assert resp.status_code == 302
    return client


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield
