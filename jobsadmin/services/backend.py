"""Thin client for the hosted backend (REST rows + auth).

Rows live behind a PostgREST-style endpoint (``/rest/v1/<table>``) and the
admin sessions behind ``/auth/v1``. We call both with ``requests`` directly
instead of pulling in the vendor SDK; the surface we need is small.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import requests


FILTER_OPS = {"eq", "neq", "lt", "lte", "gt", "gte", "in", "is"}

Filter = Tuple[str, str, Any]


class BackendError(Exception):
    """Any failure talking to the backend."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.message = message
        self.status = status


class AuthError(BackendError):
    pass


class NotFound(BackendError):
    pass


def _format_value(value):
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _quote_item(value):
    # double-quoted so reserved characters (, ) " inside ids stay literal
    text = _format_value(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def encode_filter(column: str, op: str, value) -> Tuple[str, str]:
    """Encode one ``(column, op, value)`` predicate as a query parameter."""
    if op not in FILTER_OPS:
        raise ValueError(f"unsupported filter operator: {op}")
    if op == "in":
        items = ",".join(_quote_item(v) for v in value)
        return column, f"in.({items})"
    return column, f"{op}.{_format_value(value)}"


def parse_content_range(header: Optional[str]) -> int:
    # "0-24/573" or "*/573"
    if not header or "/" not in header:
        return 0
    total = header.rsplit("/", 1)[1]
    try:
        return int(total)
    except ValueError:
        return 0


class BackendClient:
    def __init__(self, base_url: str, api_key: Optional[str], timeout: float = 15, session=None):
        self.base_url = (base_url or "").rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    # -- plumbing ---------------------------------------------------------

    def _headers(self, access_token=None, extra=None):
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
        token = access_token or self.api_key
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method, path, params=None, json=None, headers=None):
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(
                method, url, params=params, json=json, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise BackendError(f"{method} {path} failed: {e}") from e

        if resp.status_code >= 400:
            message = _error_message(resp)
            if resp.status_code in (401, 403):
                raise AuthError(message, status=resp.status_code)
            if resp.status_code == 404:
                raise NotFound(message, status=resp.status_code)
            raise BackendError(message, status=resp.status_code)
        return resp

    @staticmethod
    def _params(filters: Iterable[Filter] = (), **extra) -> List[Tuple[str, str]]:
        params = [encode_filter(col, op, val) for col, op, val in filters]
        params.extend((k, v) for k, v in extra.items() if v is not None)
        return params

    # -- rows -------------------------------------------------------------

    def select(self, table: str, columns: str = "*", filters: Sequence[Filter] = (),
               order: Optional[str] = None, ascending: bool = False,
               limit: Optional[int] = None) -> List[Dict[str, Any]]:
        params = self._params(
            filters,
            select=columns,
            order=f"{order}.{'asc' if ascending else 'desc'}" if order else None,
            limit=str(limit) if limit is not None else None,
        )
        resp = self._request("GET", f"/rest/v1/{table}", params=params, headers=self._headers())
        data = resp.json()
        return data or []

    def get(self, table: str, row_id, columns: str = "*") -> Optional[Dict[str, Any]]:
        rows = self.select(table, columns=columns, filters=[("id", "eq", row_id)], limit=1)
        return rows[0] if rows else None

    def count(self, table: str, filters: Sequence[Filter] = ()) -> int:
        params = self._params(filters, select="id")
        headers = self._headers(extra={"Prefer": "count=exact", "Range-Unit": "items", "Range": "0-0"})
        resp = self._request("HEAD", f"/rest/v1/{table}", params=params, headers=headers)
        return parse_content_range(resp.headers.get("Content-Range"))

    def update(self, table: str, row_id, fields: Dict[str, Any], columns: str = "*") -> Dict[str, Any]:
        params = self._params([("id", "eq", row_id)], select=columns)
        headers = self._headers(extra={"Prefer": "return=representation"})
        resp = self._request("PATCH", f"/rest/v1/{table}", params=params, json=fields, headers=headers)
        rows = resp.json() or []
        if not rows:
            raise NotFound(f"{table} row {row_id} not found", status=404)
        return rows[0]

    # -- auth -------------------------------------------------------------

    def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        try:
            resp = self._request(
                "POST",
                "/auth/v1/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
                headers=self._headers(),
            )
        except BackendError as e:
            # the auth endpoint answers bad credentials with 400
            if e.status in (400, 401, 403):
                raise AuthError(e.message, status=e.status) from e
            raise
        session = resp.json() or {}
        if not session.get("access_token") or not session.get("user"):
            raise AuthError("Sign in failed")
        return session

    def get_user(self, access_token: str) -> Dict[str, Any]:
        resp = self._request("GET", "/auth/v1/user", headers=self._headers(access_token=access_token))
        user = resp.json()
        if not user:
            raise AuthError("No user found")
        return user

    def sign_out(self, access_token: str) -> None:
        self._request("POST", "/auth/v1/logout", headers=self._headers(access_token=access_token))


def _error_message(resp) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {resp.status_code}"
