from __future__ import annotations

import httpx

from .config_types import ClientConfig
from .models import Config
from .routes import CONFIG_ROUTE
from .transport import Transport


class ConfigFetcher:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self._t = Transport(cfg, http_transport=http_transport)

    def __enter__(self) -> "ConfigFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._t.close()

    def fetch_config(self, platform: str, version: str) -> Config:
        """Fetch the current configuration for ``platform`` at ``version``.

        Raises ValueError before any request when either argument is empty,
        TransportError when the request cannot complete, ServerError on a
        non-success status and DecodeError when the body is not a JSON object.
        """
        data = self._t.send(CONFIG_ROUTE, platform=platform, version=version)
        return Config.from_payload(data)


def fetch_config(
        cfg: ClientConfig,
        platform: str,
        version: str,
        *,
        http_transport: httpx.BaseTransport | None = None,
) -> Config:
    with ConfigFetcher(cfg, http_transport=http_transport) as fetcher:
        return fetcher.fetch_config(platform, version)
