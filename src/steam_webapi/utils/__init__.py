"""Utility functions for the Steam Web API client."""

from .steam_id import extract_steam_id, join_steam_ids, ProtocolViolationError

__all__ = ["extract_steam_id", "join_steam_ids", "ProtocolViolationError"]
