"""IPlayerService API endpoints.

Game libraries and playtime. Results for private profiles are empty unless
the API key belongs to the queried account.

Reference: https://partner.steamgames.com/doc/webapi/IPlayerService
"""

from dataclasses import dataclass
from typing import Any

from steam_webapi.endpoints.base import EndpointRequest, endpoint


@endpoint(
    name="ownedGames",
    interface="IPlayerService",
    method="GetOwnedGames",
    version="v0001",
)
@dataclass(frozen=True)
class OwnedGames(EndpointRequest):
    steam_id: str

    def query(self) -> dict[str, Any]:
        return {"steamid": self.steam_id}


@endpoint(
    name="recentlyPlayedGames",
    interface="IPlayerService",
    method="GetRecentlyPlayedGames",
    version="v0001",
)
@dataclass(frozen=True)
class RecentlyPlayedGames(EndpointRequest):
    steam_id: str

    def query(self) -> dict[str, Any]:
        return {"steamid": self.steam_id}


@endpoint(
    name="isPlayingSharedGame",
    interface="IPlayerService",
    method="IsPlayingSharedGame",
    version="v0001",
)
@dataclass(frozen=True)
class IsPlayingSharedGame(EndpointRequest):
    """Original owner's SteamID if the player is borrowing the game, else 0."""

    steam_id: str
    app_id: int

    def query(self) -> dict[str, Any]:
        return {"steamid": self.steam_id, "appid_playing": self.app_id}
