"""Steam OpenID sign-in."""

from .openid import OpenIDConsumer, SteamOpenID, STEAM_OPENID_IDENTITY

__all__ = ["OpenIDConsumer", "SteamOpenID", "STEAM_OPENID_IDENTITY"]
