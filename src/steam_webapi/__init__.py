"""Steam Web API client and Steam OpenID sign-in."""

from steam_webapi.client import (
    LoginError,
    LoginResult,
    LoginState,
    SteamAPIError,
    SteamClient,
    UpstreamRequestError,
)
from steam_webapi.endpoints import (
    ArgumentCountError,
    ConfigurationError,
    UnknownEndpointError,
    resolve,
)
from steam_webapi.utils.steam_id import ProtocolViolationError

__version__ = "0.1.0"

__all__ = [
    "ArgumentCountError",
    "ConfigurationError",
    "LoginError",
    "LoginResult",
    "LoginState",
    "ProtocolViolationError",
    "SteamAPIError",
    "SteamClient",
    "UnknownEndpointError",
    "UpstreamRequestError",
    "resolve",
]
