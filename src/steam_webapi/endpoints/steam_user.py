"""ISteamUser API endpoints.

Reference: https://partner.steamgames.com/doc/webapi/ISteamUser
"""

from dataclasses import dataclass
from typing import Any, Sequence

from steam_webapi.endpoints.base import EndpointRequest, endpoint
from steam_webapi.utils.steam_id import join_steam_ids


@endpoint(
    name="playerSummaries",
    interface="ISteamUser",
    method="GetPlayerSummaries",
    version="v0002",
)
@dataclass(frozen=True)
class PlayerSummaries(EndpointRequest):
    """Basic profile information for one or more SteamID64s."""

    steam_ids: str | Sequence[str]

    def query(self) -> dict[str, Any]:
        return {"steamids": join_steam_ids(self.steam_ids)}


@endpoint(
    name="friendList",
    interface="ISteamUser",
    method="GetFriendList",
    version="v0001",
)
@dataclass(frozen=True)
class FriendList(EndpointRequest):
    """Friend list of a user whose profile is public."""

    steam_id: str
    relationship: str = "friend"

    def query(self) -> dict[str, Any]:
        return {"steamid": self.steam_id, "relationship": self.relationship}


@endpoint(
    name="playerBans",
    interface="ISteamUser",
    method="GetPlayerBans",
    version="v1",
)
@dataclass(frozen=True)
class PlayerBans(EndpointRequest):
    """Community, VAC and economy ban status for one or more players."""

    steam_ids: str | Sequence[str]

    def query(self) -> dict[str, Any]:
        return {"steamids": join_steam_ids(self.steam_ids)}
