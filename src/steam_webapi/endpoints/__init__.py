"""Steam API endpoint definitions.

Importing this package registers every endpoint with EndpointRegistry.
"""

from .base import (
    ArgumentCountError,
    ConfigurationError,
    EndpointRegistry,
    EndpointRequest,
    UnknownEndpointError,
    endpoint,
    resolve,
)
from .player_service import IsPlayingSharedGame, OwnedGames, RecentlyPlayedGames
from .steam_news import NewsForApp
from .steam_user import FriendList, PlayerBans, PlayerSummaries
from .user_stats import (
    GlobalAchievementPercentages,
    PlayerAchievements,
    SchemaForGame,
    UserStatsForGame,
)

__all__ = [
    "ArgumentCountError",
    "ConfigurationError",
    "EndpointRegistry",
    "EndpointRequest",
    "UnknownEndpointError",
    "endpoint",
    "resolve",
    "FriendList",
    "GlobalAchievementPercentages",
    "IsPlayingSharedGame",
    "NewsForApp",
    "OwnedGames",
    "PlayerAchievements",
    "PlayerBans",
    "PlayerSummaries",
    "RecentlyPlayedGames",
    "SchemaForGame",
    "UserStatsForGame",
]
