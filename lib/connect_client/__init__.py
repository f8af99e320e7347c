from .client import ConfigFetcher, fetch_config
from .config_types import ClientConfig
from .errors import ConnectClientError, DecodeError, ServerError, TransportError
from .models import Config

__all__ = [
    "ClientConfig",
    "Config",
    "ConfigFetcher",
    "ConnectClientError",
    "DecodeError",
    "ServerError",
    "TransportError",
    "fetch_config",
]
