from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Route:
    """Declarative binding of one remote call to an HTTP verb and path.

    ``query`` names the parameters that must be sent as the query string.
    Every declared parameter is required and must be a non-empty string.
    """

    method: str
    path: str
    query: tuple[str, ...] = ()

    def build(self, **params: Any) -> tuple[str, dict[str, str]]:
        extra = sorted(set(params) - set(self.query))
        if extra:
            raise ValueError(f"Unexpected parameters for {self.method} {self.path}: {', '.join(extra)}")

        query: dict[str, str] = {}
        for name in self.query:
            value = params.get(name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} is required.")
            query[name] = value
        return self.path, query


CONFIG_ROUTE = Route("GET", "/config", query=("platform", "version"))
