"""Steam Web API client with Steam OpenID sign-in.

This client provides:
- fetch(): one GET against a registered Steam Web API endpoint, returning
  the raw response body
- login(): the OpenID redirect/validate/callback sequence that proves a
  visitor owns a Steam account and stores their profile in the session

All requests go through a single TLS-verifying httpx client. There is no
retrying or caching; callers decide what to do with an UpstreamRequestError.
"""

import enum
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Mapping, MutableMapping

import httpx

from steam_webapi.auth.openid import OpenIDConsumer, SteamOpenID
from steam_webapi.endpoints import ArgumentCountError, EndpointRequest, PlayerSummaries, resolve
from steam_webapi.utils.steam_id import ProtocolViolationError, extract_steam_id


logger = logging.getLogger(__name__)

# Session key the login flow writes the visitor's profile under
SESSION_KEY = "steam_auth"


class SteamAPIError(Exception):
    """Base exception for Steam API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamRequestError(SteamAPIError):
    """Raised when a request to Steam fails or returns a non-2xx status."""

    pass


class LoginError(SteamAPIError):
    """Raised when the login flow fails unexpectedly mid-handshake."""

    pass


class LoginState(enum.Enum):
    """Outcome of one login() call."""

    REDIRECTED = "redirected"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class LoginResult:
    """
    Result of a login() call.

    Attributes:
        state: Where the flow ended for this request
        redirect_url: Where the web framework should send the visitor, if anywhere
        player: Player summary on success
        error: Reason for a FAILED outcome, when one is known
    """

    state: LoginState
    redirect_url: str | None = None
    player: dict[str, Any] | None = None
    error: str | None = None

    def __bool__(self) -> bool:
        return self.state is not LoginState.FAILED


class SteamClient:
    """Client for the Steam Web API and Steam OpenID."""

    def __init__(
        self,
        website: str | None = None,
        api_key: str | None = None,
        timeout: float = 30.0,
        openid_factory: Callable[..., OpenIDConsumer] = SteamOpenID,
    ):
        """
        Initialize Steam API client.

        Args:
            website: Relying-party base URL for OpenID. If not provided, reads
                     from STEAM_WEBSITE env var.
            api_key: Steam Web API key. If not provided, reads from STEAM_API_KEY env var.
            timeout: Request timeout in seconds.
            openid_factory: Builds the OpenID relying party for a request. Called
                            with realm, return_to, params and session keywords.
        """
        self.website = website or os.getenv("STEAM_WEBSITE")
        if not self.website:
            raise ValueError("STEAM_WEBSITE must be provided or set in environment")

        self.api_key = api_key or os.getenv("STEAM_API_KEY")
        if not self.api_key:
            raise ValueError("STEAM_API_KEY must be provided or set in environment")

        self.timeout = timeout
        self._openid_factory = openid_factory

        self._client = httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json"},
            verify=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "SteamClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def build_url(self, request: EndpointRequest) -> str:
        """Build the request URL, adding the API key where the endpoint needs it."""
        if request.requires_key:
            return request.build_url({"key": self.api_key})
        return request.build_url()

    def _redact(self, url: str) -> str:
        assert self.api_key is not None  # For type checker
        return url.replace(self.api_key, "***")

    def _request(self, url: str) -> str:
        """
        Make one GET request.

        Args:
            url: Request URL

        Returns:
            Response body as text

        Raises:
            UpstreamRequestError: On network errors and non-2xx responses
        """
        logger.debug(f"GET {self._redact(url)}")
        try:
            response = self._client.get(url)

            if response.status_code == 403:
                raise UpstreamRequestError(
                    "Access forbidden - check API key permissions",
                    response.status_code,
                )

            if response.status_code == 401:
                raise UpstreamRequestError("Invalid API key", response.status_code)

            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            raise UpstreamRequestError(
                self._redact(str(e)), e.response.status_code
            ) from e

        except httpx.HTTPError as e:
            raise UpstreamRequestError(f"HTTP error: {self._redact(str(e))}") from e

        return response.text

    def fetch(self, request: EndpointRequest | str, *args: Any) -> str:
        """
        Make a GET request to a Steam Web API endpoint.

        Args:
            request: Endpoint request object, or a symbolic endpoint name
            *args: Endpoint arguments when request is a name

        Returns:
            Raw response body (usually JSON text, not parsed)

        Raises:
            ConfigurationError: Unknown endpoint name or wrong argument count
            UpstreamRequestError: On network errors and non-2xx responses

        Example:
            client.fetch("playerSummaries", ["76561198000000001", "76561198000000002"])
            client.fetch(OwnedGames("76561198000000001"))
        """
        if isinstance(request, str):
            request = resolve(request, *args)
        elif args:
            raise ArgumentCountError(
                f'Endpoint "{request.name}" is already built, got {len(args)} extra argument(s)'
            )
        return self._request(self.build_url(request))

    def get_player_summary(self, steam_id: str) -> dict[str, Any]:
        """
        Get the player summary for a single Steam ID.

        Raises:
            ProtocolViolationError: If Steam returns no player for the ID
            UpstreamRequestError: On network errors and non-2xx responses
            ValueError: If the response is not valid JSON
        """
        data = json.loads(self.fetch(PlayerSummaries(steam_id)))
        players = (data.get("response") or {}).get("players") or []
        if not players:
            raise ProtocolViolationError(f"No player found for Steam ID {steam_id}")
        return players[0]

    def login(
        self,
        return_to: str,
        on_success: Callable[[dict[str, Any]], Any] | None = None,
        create_session: bool = True,
        *,
        params: Mapping[str, Any],
        session: MutableMapping[str, Any],
    ) -> LoginResult:
        """
        Sign a visitor in with Steam.

        Call this from the handler serving return_to. On the first request it
        returns a REDIRECTED result pointing at Steam; Steam then sends the
        visitor back to return_to with the OpenID response, and the second
        call validates it.

        Args:
            return_to: URL Steam redirects back to, and where the visitor lands
                       after a successful sign-in
            on_success: Called with the player summary once it is fetched
            create_session: Store nickname, steamProfile and avatar in the session
            params: Query parameters of the current request
            session: Session store for the current visitor

        Returns:
            LoginResult; falsy when the sign-in failed

        Raises:
            LoginError: On network failures, malformed responses and errors
                        raised by the OpenID library or on_success
        """
        openid = self._openid_factory(
            realm=self.website, return_to=return_to, params=params, session=session
        )

        try:
            if not openid.mode:
                auth_url = openid.auth_url()
                logger.info("Redirecting visitor to Steam sign-in")
                return LoginResult(LoginState.REDIRECTED, redirect_url=auth_url)

            if not openid.validate():
                logger.info("Steam OpenID validation failed")
                return LoginResult(LoginState.FAILED, error="OpenID validation failed")

            steam_id = extract_steam_id(openid.identity)
            player = self.get_player_summary(steam_id)
            try:
                record = {
                    "nickname": player["personaname"],
                    "steamProfile": player["profileurl"],
                    "avatar": player["avatar"],
                }
            except KeyError as e:
                raise ProtocolViolationError(
                    f"Player summary for {steam_id} is missing {e}"
                ) from e

            if on_success is not None:
                on_success(player)

            if create_session:
                session[SESSION_KEY] = record

        except ProtocolViolationError as e:
            logger.warning(f"Steam login failed: {e}")
            return LoginResult(LoginState.FAILED, error=str(e))

        except Exception as e:
            logger.exception("Unexpected error during Steam login")
            raise LoginError(f"Steam login failed: {e}") from e

        logger.info(f"Steam user {steam_id} signed in")
        return LoginResult(LoginState.SUCCEEDED, redirect_url=return_to, player=player)
