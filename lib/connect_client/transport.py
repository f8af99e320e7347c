from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import DecodeError, ServerError, TransportError
from .routes import Route

log = logging.getLogger(__name__)


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {
            "User-Agent": cfg.user_agent,
            "Accept": "application/json",
        }
        self._client = httpx.Client(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def send(self, route: Route, **params: Any) -> Any:
        path, query = route.build(**params)
        return self.request(route.method, path, params=query)

    def request(self, method: str, path: str, *, params: dict[str, str] | None = None) -> Any:
        log.debug("%s %s params=%s", method, path, params)
        try:
            r = self._client.request(method, path, params=params)
        except httpx.RequestError as e:
            log.debug("%s %s failed: %s", method, path, e)
            raise TransportError(str(e) or type(e).__name__) from e

        if not r.is_success:
            raise self._server_error(method, path, r)

        if not r.content:
            raise DecodeError(f"{method} {path} returned an empty body")
        try:
            return r.json()
        except (ValueError, RecursionError) as e:
            log.debug("%s %s returned undecodable body: %s", method, path, e)
            raise DecodeError(f"{method} {path} returned invalid JSON: {e}") from e

    @staticmethod
    def _server_error(method: str, path: str, r: httpx.Response) -> ServerError:
        log.debug("%s %s -> %s", method, path, r.status_code)
        msg = f"{method} {path} failed with {r.status_code}"
        details = None

        # Try parse body as json for better errors
        data: Any = None
        try:
            data = r.json()
        except (ValueError, RecursionError):
            data = None

        if isinstance(data, dict) and "detail" in data:
            details = json.dumps(data, ensure_ascii=False)
            msg = str(data.get("detail") or msg)
        elif r.text:
            details = r.text[:1000]

        return ServerError(r.status_code, msg, details)
