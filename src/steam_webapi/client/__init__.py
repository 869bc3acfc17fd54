"""Steam API client module."""

from .steam_client import (
    LoginError,
    LoginResult,
    LoginState,
    SESSION_KEY,
    SteamAPIError,
    SteamClient,
    UpstreamRequestError,
)

__all__ = [
    "LoginError",
    "LoginResult",
    "LoginState",
    "SESSION_KEY",
    "SteamAPIError",
    "SteamClient",
    "UpstreamRequestError",
]
