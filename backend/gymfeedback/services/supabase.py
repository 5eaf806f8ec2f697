# gymfeedback/services/supabase.py
from __future__ import annotations
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Mapping, Optional

import httpx

from gymfeedback.core.config import Settings, get_settings
from gymfeedback.core.errors import PersistenceError


def _eq(value: Any) -> str:
    if isinstance(value, bool):
        return "eq." + ("true" if value else "false")
    return f"eq.{value}"


def _parse_count(content_range: Optional[str]) -> int:
    """'0-24/3573' -> 3573, '*/0' -> 0."""
    if not content_range or "/" not in content_range:
        raise ValueError(f"missing Content-Range: {content_range!r}")
    total = content_range.rsplit("/", 1)[1]
    return int(total)


class SupabaseClient:
    """Thin PostgREST client. Every failure surfaces as PersistenceError."""

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        settings = settings or get_settings()
        self.base_url = settings.supabase_url.rstrip("/") + "/rest/v1"
        self.timeout = settings.supabase_timeout
        self.transport = transport
        self.headers = {
            "apikey": settings.supabase_anon_key,
            "Authorization": f"Bearer {settings.supabase_anon_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Prefer": "return=representation",
        }

    @asynccontextmanager
    async def client(self):
        async with httpx.AsyncClient(
            base_url=self.base_url, headers=self.headers, timeout=self.timeout, transport=self.transport
        ) as c:
            yield c

    async def _request(
        self,
        method: str,
        table: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        try:
            async with self.client() as c:
                r = await c.request(method, f"/{table}", params=params, json=json, headers=headers)
                r.raise_for_status()
                return r
        except httpx.HTTPStatusError as exc:
            code = exc.response.status_code
            raise PersistenceError(
                f"{method} /{table} failed: {code} {exc.response.text}",
                table=table, operation=method, status_code=code,
            ) from exc
        except httpx.HTTPError as exc:
            raise PersistenceError(
                f"{method} /{table} failed: {exc!r}", table=table, operation=method
            ) from exc

    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params = {"select": columns}
        for k, v in (filters or {}).items():
            params[k] = _eq(v)
        if order:
            params["order"] = order
        if limit is not None:
            params["limit"] = str(limit)
        r = await self._request("GET", table, params=params)
        return r.json() or []

    async def insert(self, table: str, row: Mapping[str, Any]) -> Dict[str, Any]:
        r = await self._request("POST", table, json=[dict(row)])
        rows = r.json() or []
        if not rows:
            raise PersistenceError(f"POST /{table} returned no rows", table=table, operation="POST")
        return rows[0]

    async def update(
        self, table: str, patch: Mapping[str, Any], *, filters: Mapping[str, Any]
    ) -> List[Dict[str, Any]]:
        params = {k: _eq(v) for k, v in filters.items()}
        r = await self._request("PATCH", table, params=params, json=dict(patch))
        return r.json() or []

    async def count(self, table: str) -> int:
        """Exact row count via HEAD + Prefer: count=exact."""
        r = await self._request("HEAD", table, params={"select": "*"}, headers={"Prefer": "count=exact"})
        try:
            return _parse_count(r.headers.get("content-range"))
        except ValueError as exc:
            raise PersistenceError(str(exc), table=table, operation="HEAD") from exc
