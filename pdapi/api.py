"""HTTP transport for the REST API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

import requests

from pdapi.model import Model

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.pagerduty.com"
_ACCEPT = "application/vnd.pagerduty+json;version=2"

M = TypeVar("M", bound=Model)


class APIError(Exception):
    """An error response from the API."""

    def __init__(
        self,
        status_code: int,
        message: str = "",
        code: int | None = None,
        errors: list[str] | None = None,
        method: str = "",
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.code = code
        self.errors = list(errors or [])
        self.method = method
        self.url = url
        text = f"{method} {url}: HTTP {status_code}".strip()
        if code is not None:
            text += f", code {code}"
        if message:
            text += f": {message}"
        if self.errors:
            text += f"; errors: {self.errors}"
        super().__init__(text)

    @classmethod
    def from_response(
        cls, method: str, url: str, status_code: int, content: bytes
    ) -> APIError:
        """Build the error from a response body, structured or not."""
        try:
            payload = json.loads(content)
        except ValueError:
            payload = None
        detail = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(detail, dict):
            return cls(
                status_code,
                detail.get("message") or "",
                code=detail.get("code"),
                errors=detail.get("errors") or [],
                method=method,
                url=url,
            )
        return cls(
            status_code,
            content.decode("utf-8", "replace").strip(),
            method=method,
            url=url,
        )


@dataclass(frozen=True)
class Response:
    """A successful HTTP response."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    def json(self) -> Any:
        """Decoded JSON body; an empty body decodes to an empty dict."""
        if not self.content.strip():
            return {}
        return json.loads(self.content)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(options: Model | Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Turn options into query pairs; lists are sent as repeated ``key[]``."""
    if options is None:
        return []
    if isinstance(options, Model):
        data = options.to_dict()
    else:
        data = {key: value for key, value in options.items() if value is not None}
    pairs: list[tuple[str, str]] = []
    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", _query_value(item)) for item in value)
        else:
            pairs.append((key, _query_value(value)))
    return pairs


class ApiClient:
    """Sends authenticated requests to the API."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

    def request(
        self,
        method: str,
        path: str,
        params: Model | Mapping[str, Any] | None = None,
        body: Model | Mapping[str, Any] | None = None,
    ) -> Response:
        """Send one request; raise APIError on an error status."""
        url = self.base_url + path
        headers = {
            "Accept": _ACCEPT,
            "Authorization": f"Token token={self.token}",
        }
        data = None
        if body is not None:
            payload = body.to_dict() if isinstance(body, Model) else body
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"
        query = encode_query(params)
        log.debug("%s %s", method, url)
        raw = self.session.request(
            method, url, params=query or None, data=data, headers=headers
        )
        if raw.status_code >= 400:
            raise APIError.from_response(method, url, raw.status_code, raw.content)
        return Response(raw.status_code, raw.headers, raw.content)

    def paged_get(self, path: str, key: str, item_type: type[M]) -> list[M]:
        """Fetch every page of a list endpoint and return the items under ``key``."""
        items: list[M] = []
        params: dict[str, int] | None = None
        offset = 0
        while True:
            page = self.request("GET", path, params=params).json()
            batch = [item_type.from_dict(item) for item in page.get(key) or []]
            items.extend(batch)
            if not page.get("more"):
                return items
            limit = page.get("limit") or len(batch)
            if not limit:
                return items
            offset = (page.get("offset") or offset) + limit
            params = {"limit": limit, "offset": offset}