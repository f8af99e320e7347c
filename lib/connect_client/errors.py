from __future__ import annotations


class ConnectClientError(Exception):
    """Base client error."""


class TransportError(ConnectClientError):
    """Transport/network layer error."""


class DecodeError(ConnectClientError):
    """Response body could not be decoded into the expected shape."""


class ServerError(ConnectClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
