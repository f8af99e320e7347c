from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .errors import DecodeError


class Config(Mapping[str, Any]):
    """Configuration returned by the server for a platform/version pair.

    The schema belongs to the server, so the record is kept as an opaque
    read-only mapping of the decoded JSON object.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._data: dict[str, Any] = dict(data or {})

    @classmethod
    def from_payload(cls, data: Any) -> "Config":
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}.")
        if not all(isinstance(key, str) for key in data):
            raise DecodeError("Config keys must be strings.")
        return cls(data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Config({self._data!r})"

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)
