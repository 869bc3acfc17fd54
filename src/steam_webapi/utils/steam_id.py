"""Steam ID helpers.

The Steam Web API identifies accounts by SteamID64, a 17-digit number that
starts with 7656119. Steam's OpenID provider hands it back embedded in the
claimed identity URL:

    https://steamcommunity.com/openid/id/76561198000000000

This module pulls the ID out of that URL and serializes ID lists the way
the multi-ID endpoints (GetPlayerSummaries, GetPlayerBans) expect them.
IDs are treated as opaque strings and never converted.
"""

import re
from typing import Iterable


class ProtocolViolationError(Exception):
    """Raised when Steam returns data outside the expected shape."""

    pass


CLAIMED_ID_PATTERN = re.compile(r"^https://steamcommunity\.com/openid/id/(7[0-9]{15,25})$")


def extract_steam_id(claimed_id: str | None) -> str:
    """
    Extract the SteamID64 from an OpenID claimed identity URL.

    Args:
        claimed_id: Claimed identity returned by Steam's OpenID provider

    Returns:
        SteamID64 string

    Raises:
        ProtocolViolationError: If the URL is not a Steam community identity
    """
    match = CLAIMED_ID_PATTERN.match(claimed_id or "")
    if not match:
        raise ProtocolViolationError(
            f"Unexpected OpenID claimed identity: {claimed_id!r}"
        )
    return match.group(1)


def join_steam_ids(steam_ids: str | Iterable[str]) -> str:
    """Join one or more Steam IDs into the comma-separated form, keeping order."""
    if isinstance(steam_ids, str):
        return steam_ids
    return ",".join(str(steam_id) for steam_id in steam_ids)
