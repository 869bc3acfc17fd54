"""Steam OpenID 2.0 relying party.

Steam signs users in with OpenID 2.0, not OAuth2. The round trip is:

1. Redirect the visitor to steamcommunity.com/openid/login
2. Steam redirects back to return_to with openid.* query parameters
3. The relying party verifies the assertion with Steam (check_authentication)
4. The claimed identity carries the visitor's SteamID64

Discovery, association and signature checks are done by python3-openid's
Consumer. This module only binds it to Steam's identity endpoint and to the
current request, exposing the small surface SteamClient.login() needs.
"""

import logging
from typing import Any, Mapping, MutableMapping, Protocol

from openid.consumer.consumer import Consumer, SUCCESS
from openid.store.interface import OpenIDStore


logger = logging.getLogger(__name__)

STEAM_OPENID_IDENTITY = "https://steamcommunity.com/openid/"


class OpenIDConsumer(Protocol):
    """What the login flow needs from an OpenID relying party."""

    identity: str | None

    @property
    def mode(self) -> str | None:
        """openid.mode of the current request, None on the initial request."""
        ...

    def auth_url(self) -> str:
        """URL of the provider's sign-in page."""
        ...

    def validate(self) -> bool:
        """Verify the provider's assertion; on success identity is the claimed id."""
        ...


class SteamOpenID:
    """
    python3-openid consumer bound to Steam and to one incoming request.

    Attributes:
        identity: Steam's identity endpoint before validation, the visitor's
                  claimed identity URL after a successful validate()
    """

    def __init__(
        self,
        realm: str,
        return_to: str,
        params: Mapping[str, Any],
        session: MutableMapping[str, Any],
        identity: str = STEAM_OPENID_IDENTITY,
        store: OpenIDStore | None = None,
    ):
        """
        Initialize the relying party.

        Args:
            realm: Relying-party base URL shown to the visitor by Steam
            return_to: URL Steam redirects back to
            params: Query parameters of the current request
            session: Session store; the consumer keeps discovery state in it
            identity: OpenID identifier to start discovery from
            store: python3-openid association store. None runs in stateless
                   mode, verifying every assertion directly with Steam.
        """
        self.realm = realm
        self.return_to = return_to
        self.params = dict(params)
        self.identity: str | None = identity
        self._consumer = Consumer(session, store)

    @property
    def mode(self) -> str | None:
        return self.params.get("openid.mode") or None

    def auth_url(self) -> str:
        """
        Start discovery and build the Steam sign-in URL.

        Raises:
            openid.consumer.discover.DiscoveryFailure: If Steam cannot be reached
        """
        auth_request = self._consumer.begin(self.identity)
        return auth_request.redirectURL(self.realm, return_to=self.return_to)

    def validate(self) -> bool:
        response = self._consumer.complete(self.params, self.return_to)
        if response.status != SUCCESS:
            logger.info(
                f"OpenID assertion rejected ({response.status}): "
                f"{getattr(response, 'message', '')}"
            )
            return False
        self.identity = response.identity_url
        return True
