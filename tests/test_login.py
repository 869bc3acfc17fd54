"""Tests for the Steam OpenID login flow."""

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest

from steam_webapi.client.steam_client import (
    LoginError,
    LoginState,
    SESSION_KEY,
    SteamClient,
)


STEAM_ID = "76561198000000001"
CLAIMED_ID = f"https://steamcommunity.com/openid/id/{STEAM_ID}"
RETURN_TO = "https://example.com/login"
AUTH_URL = "https://steamcommunity.com/openid/login?openid.mode=checkid_setup"
CALLBACK_PARAMS = {"openid.mode": "id_res", "openid.claimed_id": CLAIMED_ID}


class FakeOpenID:
    """Stand-in for the OpenID relying party."""

    def __init__(self, mode=None, valid=True, claimed_id=CLAIMED_ID, error=None):
        self.mode = mode
        self.identity = "https://steamcommunity.com/openid/"
        self.valid = valid
        self.claimed_id = claimed_id
        self.error = error
        self.validated = False
        self.factory_kwargs = None

    def __call__(self, **kwargs):
        self.factory_kwargs = kwargs
        return self

    def auth_url(self):
        return AUTH_URL

    def validate(self):
        self.validated = True
        if self.error:
            raise self.error
        if self.valid:
            self.identity = self.claimed_id
        return self.valid


def players_body(*players) -> str:
    return json.dumps({"response": {"players": list(players)}})


PLAYER = {"personaname": "A", "profileurl": "U", "avatar": "X", "steamid": STEAM_ID}


def make_client(openid: FakeOpenID) -> SteamClient:
    return SteamClient(
        website="https://example.com", api_key="test_key", openid_factory=openid
    )


def mock_profile(client: SteamClient, text: str = "", status_code: int = 200, **kwargs):
    """Patch the HTTP client to answer the profile lookup."""
    response = httpx.Response(
        status_code,
        text=text,
        request=httpx.Request("GET", "https://api.steampowered.com/"),
    )
    return patch.object(client._client, "get", return_value=response, **kwargs)


class TestLoginRedirect:
    """Tests for the initial request, before Steam calls back."""

    def test_redirects_to_auth_url(self):
        openid = FakeOpenID(mode=None)
        session: dict = {}
        client = make_client(openid)

        with patch.object(client._client, "get") as mock_get:
            result = client.login(RETURN_TO, params={}, session=session)

        assert result.state is LoginState.REDIRECTED
        assert result.redirect_url == AUTH_URL
        assert session == {}
        assert not openid.validated
        mock_get.assert_not_called()

    def test_factory_receives_request(self):
        openid = FakeOpenID(mode=None)
        session: dict = {}
        client = make_client(openid)

        client.login(RETURN_TO, params={"a": "b"}, session=session)

        assert openid.factory_kwargs == {
            "realm": "https://example.com",
            "return_to": RETURN_TO,
            "params": {"a": "b"},
            "session": session,
        }

    def test_discovery_failure_raises_login_error(self):
        openid = FakeOpenID(mode=None)
        openid.auth_url = MagicMock(side_effect=RuntimeError("discovery failed"))
        client = make_client(openid)

        with pytest.raises(LoginError):
            client.login(RETURN_TO, params={}, session={})


class TestLoginSuccess:
    """Tests for a validated callback."""

    def test_writes_session_and_redirects(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        client = make_client(openid)

        with mock_profile(client, players_body(PLAYER)) as mock_get:
            result = client.login(RETURN_TO, params=CALLBACK_PARAMS, session=session)

        assert result.state is LoginState.SUCCEEDED
        assert result.redirect_url == RETURN_TO
        assert result.player == PLAYER
        assert bool(result)
        assert session[SESSION_KEY] == {"nickname": "A", "steamProfile": "U", "avatar": "X"}
        assert f"steamids={STEAM_ID}" in mock_get.call_args.args[0]

    def test_calls_success_callback(self):
        openid = FakeOpenID(mode="id_res")
        callback = MagicMock()
        client = make_client(openid)

        with mock_profile(client, players_body(PLAYER)):
            client.login(RETURN_TO, callback, params=CALLBACK_PARAMS, session={})

        callback.assert_called_once_with(PLAYER)

    def test_callback_runs_before_session_write(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        seen = []
        client = make_client(openid)

        with mock_profile(client, players_body(PLAYER)):
            client.login(
                RETURN_TO,
                lambda player: seen.append(SESSION_KEY in session),
                params=CALLBACK_PARAMS,
                session=session,
            )

        assert seen == [False]

    def test_without_session(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        client = make_client(openid)

        with mock_profile(client, players_body(PLAYER)):
            result = client.login(
                RETURN_TO, create_session=False, params=CALLBACK_PARAMS, session=session
            )

        assert result.state is LoginState.SUCCEEDED
        assert result.redirect_url == RETURN_TO
        assert session == {}

    def test_keeps_existing_session_entries(self):
        openid = FakeOpenID(mode="id_res")
        session = {"csrf": "token"}
        client = make_client(openid)

        with mock_profile(client, players_body(PLAYER)):
            client.login(RETURN_TO, params=CALLBACK_PARAMS, session=session)

        assert session["csrf"] == "token"
        assert SESSION_KEY in session


class TestLoginFailure:
    """Tests for callbacks that do not sign the visitor in."""

    def test_validation_false(self):
        openid = FakeOpenID(mode="id_res", valid=False)
        session: dict = {}
        client = make_client(openid)

        with patch.object(client._client, "get") as mock_get:
            result = client.login(RETURN_TO, params=CALLBACK_PARAMS, session=session)

        assert result.state is LoginState.FAILED
        assert result.redirect_url is None
        assert not result
        assert session == {}
        mock_get.assert_not_called()

    def test_unexpected_claimed_id(self):
        openid = FakeOpenID(
            mode="id_res", claimed_id="https://steamcommunity.com/openid/id/123"
        )
        session: dict = {}
        client = make_client(openid)

        with patch.object(client._client, "get") as mock_get:
            result = client.login(RETURN_TO, params=CALLBACK_PARAMS, session=session)

        assert result.state is LoginState.FAILED
        assert "claimed identity" in result.error
        assert session == {}
        mock_get.assert_not_called()

    def test_empty_players(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        callback = MagicMock()
        client = make_client(openid)

        with mock_profile(client, players_body()):
            result = client.login(
                RETURN_TO, callback, params=CALLBACK_PARAMS, session=session
            )

        assert result.state is LoginState.FAILED
        assert result.redirect_url is None
        assert session == {}
        callback.assert_not_called()

    def test_missing_players_key(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        client = make_client(openid)

        with mock_profile(client, json.dumps({"response": {}})):
            result = client.login(RETURN_TO, params=CALLBACK_PARAMS, session=session)

        assert result.state is LoginState.FAILED
        assert session == {}

    def test_incomplete_player(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        client = make_client(openid)

        with mock_profile(client, players_body({"personaname": "A"})):
            result = client.login(RETURN_TO, params=CALLBACK_PARAMS, session=session)

        assert result.state is LoginState.FAILED
        assert session == {}


class TestLoginErrors:
    """Tests for unexpected failures mid-handshake."""

    def test_profile_fetch_failure(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        client = make_client(openid)

        with mock_profile(client, status_code=503):
            with pytest.raises(LoginError):
                client.login(RETURN_TO, params=CALLBACK_PARAMS, session=session)

        assert session == {}

    def test_malformed_json(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        client = make_client(openid)

        with mock_profile(client, "<html>not json</html>"):
            with pytest.raises(LoginError) as exc_info:
                client.login(RETURN_TO, params=CALLBACK_PARAMS, session=session)

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert session == {}

    def test_validator_exception(self):
        openid = FakeOpenID(mode="id_res", error=RuntimeError("bad signature data"))
        client = make_client(openid)

        with pytest.raises(LoginError, match="bad signature data"):
            client.login(RETURN_TO, params=CALLBACK_PARAMS, session={})

    def test_callback_exception(self):
        openid = FakeOpenID(mode="id_res")
        session: dict = {}
        client = make_client(openid)

        def explode(player):
            raise RuntimeError("database down")

        with mock_profile(client, players_body(PLAYER)):
            with pytest.raises(LoginError):
                client.login(RETURN_TO, explode, params=CALLBACK_PARAMS, session=session)

        assert session == {}
