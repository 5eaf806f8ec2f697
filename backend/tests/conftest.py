"""
Pytest configuration and fixtures for backend tests.

Storage is an in-memory stand-in for Supabase's PostgREST endpoint, mounted
with httpx.MockTransport so the real SupabaseClient code runs unchanged.
"""
import json
import os
from datetime import datetime, timezone

import httpx
import pytest

# gymfeedback.main builds the app at import time
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")

from gymfeedback.core.config import Settings  # noqa: E402
from gymfeedback.services.supabase import SupabaseClient  # noqa: E402


def _matches(row, key, expr):
    op, _, value = expr.partition(".")
    assert op == "eq", f"fake only supports eq filters, got {expr}"
    cell = row.get(key)
    if isinstance(cell, bool):
        cell = "true" if cell else "false"
    return str(cell) == value


class FakePostgrest:
    """Just enough of PostgREST for select/insert/update/count."""

    def __init__(self):
        self.tables = {"professors": [], "ratings": [], "survey_responses": [], "feedbacks": []}
        self.requests = []
        self.fail = set()  # {(METHOD, table)} -> answer 500
        self._next_id = 1

    def seed(self, table, *rows):
        for row in rows:
            self.tables[table].append({"id": self._take_id(), **row})

    def _take_id(self):
        i = self._next_id
        self._next_id += 1
        return i

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        table = request.url.path.rsplit("/", 1)[-1]
        if (request.method, table) in self.fail or ("*", table) in self.fail:
            return httpx.Response(500, json={"message": "boom"})
        if table not in self.tables:
            return httpx.Response(404, json={"message": f"relation {table} does not exist"})

        params = dict(request.url.params)
        select = params.pop("select", "*")
        order = params.pop("order", None)
        limit = params.pop("limit", None)
        rows = [r for r in self.tables[table] if all(_matches(r, k, v) for k, v in params.items())]

        if request.method == "HEAD":
            n = len(rows)
            rng = f"0-{n - 1}/{n}" if n else "*/0"
            return httpx.Response(200, headers={"Content-Range": rng})

        if request.method == "GET":
            if order:
                col, _, direction = order.partition(".")
                rows = sorted(rows, key=lambda r: r.get(col), reverse=direction == "desc")
            if limit is not None:
                rows = rows[: int(limit)]
            if select != "*":
                cols = select.split(",")
                rows = [{c: r.get(c) for c in cols} for r in rows]
            return httpx.Response(200, json=rows)

        body = json.loads(request.content)
        if request.method == "POST":
            created = []
            for item in body:
                row = {"id": self._take_id(), "created_at": datetime.now(timezone.utc).isoformat(), **item}
                self.tables[table].append(row)
                created.append(row)
            return httpx.Response(201, json=created)

        if request.method == "PATCH":
            for r in rows:
                r.update(body)
            return httpx.Response(200, json=rows)

        return httpx.Response(405)

    def calls(self, method, table):
        return [r for r in self.requests if r.method == method and r.url.path.endswith("/" + table)]


@pytest.fixture
def settings():
    return Settings(supabase_url="https://test-project.supabase.co", supabase_anon_key="test-anon-key")


@pytest.fixture
def fake_db():
    return FakePostgrest()


@pytest.fixture
def db(settings, fake_db):
    return SupabaseClient(settings, transport=httpx.MockTransport(fake_db))


@pytest.fixture
def professor(fake_db):
    fake_db.seed(
        "professors",
        {"name": "Prof. Ana Santos", "specialty": "Funcional", "avatar": "🏃‍♀️",
         "rating": 0, "reviews_count": 0, "active": True},
    )
    return fake_db.tables["professors"][-1]
