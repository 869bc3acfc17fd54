"""ISteamNews API endpoints.

Reference: https://partner.steamgames.com/doc/webapi/ISteamNews

Note: This API does not require an API key.
"""

from dataclasses import dataclass
from typing import Any

from steam_webapi.endpoints.base import EndpointRequest, endpoint


@endpoint(
    name="newsForApp",
    interface="ISteamNews",
    method="GetNewsForApp",
    version="v0002",
    requires_key=False,
)
@dataclass(frozen=True)
class NewsForApp(EndpointRequest):
    """Latest news items for a game."""

    app_id: int
    count: int
    max_length: int

    def query(self) -> dict[str, Any]:
        return {
            "appid": self.app_id,
            "count": self.count,
            "maxlength": self.max_length,
        }
