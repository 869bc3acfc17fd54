"""ISteamUserStats API endpoints.

This module covers achievements and stats, both global and per player.

Reference: https://partner.steamgames.com/doc/webapi/ISteamUserStats
"""

from dataclasses import dataclass
from typing import Any

from steam_webapi.endpoints.base import EndpointRequest, endpoint


@endpoint(
    name="globalAchievementPercentages",
    interface="ISteamUserStats",
    method="GetGlobalAchievementPercentagesForApp",
    version="v0002",
    requires_key=False,
)
@dataclass(frozen=True)
class GlobalAchievementPercentages(EndpointRequest):
    """Global achievement unlock percentages for a game."""

    app_id: int

    def query(self) -> dict[str, Any]:
        # This method names the app "gameid", unlike the rest of the interface
        return {"gameid": self.app_id}


@endpoint(
    name="playerAchievements",
    interface="ISteamUserStats",
    method="GetPlayerAchievements",
    version="v0001",
)
@dataclass(frozen=True)
class PlayerAchievements(EndpointRequest):
    """Achievements of a player for one game."""

    steam_id: str
    app_id: int

    def query(self) -> dict[str, Any]:
        return {"steamid": self.steam_id, "appid": self.app_id}


@endpoint(
    name="userStatsForGame",
    interface="ISteamUserStats",
    method="GetUserStatsForGame",
    version="v0002",
)
@dataclass(frozen=True)
class UserStatsForGame(EndpointRequest):
    """Stats and achievements of a player for one game."""

    steam_id: str
    app_id: int

    def query(self) -> dict[str, Any]:
        return {"steamid": self.steam_id, "appid": self.app_id}


@endpoint(
    name="schemaForGame",
    interface="ISteamUserStats",
    method="GetSchemaForGame",
    version="v2",
)
@dataclass(frozen=True)
class SchemaForGame(EndpointRequest):
    """Game name, version and the stats and achievements it defines."""

    app_id: int

    def query(self) -> dict[str, Any]:
        return {"appid": self.app_id}
