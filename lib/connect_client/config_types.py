from __future__ import annotations

import urllib.parse
from dataclasses import dataclass

CLIENT_VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"connect-client/{CLIENT_VERSION}"

_LOCAL_HOSTS = {"localhost", "127.0.0.1", "0.0.0.0"}


def normalize_base_url(raw: str | None) -> str:
    value = str(raw or "").strip().rstrip("/")
    if not value or "://" in value:
        return value
    host = urllib.parse.urlsplit(f"//{value}").hostname or ""
    scheme = "http" if host in _LOCAL_HOSTS else "https"
    return f"{scheme}://{value}"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    timeout_s: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        base_url = normalize_base_url(self.base_url)
        if not base_url:
            raise ValueError("base_url is required.")
        object.__setattr__(self, "base_url", base_url)
