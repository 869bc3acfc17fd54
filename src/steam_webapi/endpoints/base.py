"""Endpoint request base class and registry.

Every Steam Web API method this package supports is described by a frozen
dataclass that subclasses EndpointRequest. The dataclass fields are the
method's arguments; the @endpoint decorator attaches the interface, method
and version and registers the class under its symbolic name.

Example usage:

    from steam_webapi.endpoints.base import EndpointRequest, endpoint

    @endpoint(
        name="ownedGames",
        interface="IPlayerService",
        method="GetOwnedGames",
        version="v0001",
    )
    @dataclass(frozen=True)
    class OwnedGames(EndpointRequest):
        '''Games owned by a player.'''

        steam_id: str

        def query(self) -> dict[str, Any]:
            return {"steamid": self.steam_id}

Callers that only know the symbolic name (the CLI, dynamic dispatch) go
through EndpointRegistry.resolve(), which checks the argument count before
building the request.
"""

import dataclasses
import logging
from typing import Any, Callable, ClassVar, TypeVar
from urllib.parse import urlencode


logger = logging.getLogger(__name__)

BASE_URL = "https://api.steampowered.com/"

E = TypeVar("E", bound=type["EndpointRequest"])


class ConfigurationError(Exception):
    """Raised when an endpoint is requested incorrectly (a caller bug)."""

    pass


class UnknownEndpointError(ConfigurationError):
    """Raised when no endpoint is registered under the requested name."""

    pass


class ArgumentCountError(ConfigurationError):
    """Raised when an endpoint receives the wrong number of arguments."""

    pass


class EndpointRequest:
    """
    Base class for a single Steam Web API request.

    Subclasses are frozen dataclasses decorated with @endpoint.

    Attributes:
        name: Symbolic endpoint name (e.g. "playerSummaries")
        interface: Steam API interface (e.g. "ISteamUser")
        method: API method (e.g. "GetPlayerSummaries")
        version: Version path segment as Steam spells it (e.g. "v0002")
        requires_key: Whether the API key is appended to the query
    """

    name: ClassVar[str]
    interface: ClassVar[str]
    method: ClassVar[str]
    version: ClassVar[str]
    requires_key: ClassVar[bool] = True

    def query(self) -> dict[str, Any]:
        """Query parameters for this request, in URL order."""
        raise NotImplementedError

    def build_url(self, extra: dict[str, Any] | None = None) -> str:
        """
        Build the full request URL.

        Args:
            extra: Parameters appended after the endpoint's own (e.g. the API key)

        Returns:
            URL of the form BASE_URL + interface/method/version/?query
        """
        params = self.query()
        if extra:
            params.update(extra)
        # Steam expects ID lists as literal commas
        query = urlencode(params, safe=",")
        return f"{BASE_URL}{self.interface}/{self.method}/{self.version}/?{query}"

    @classmethod
    def arity(cls) -> tuple[int, int]:
        """Return (required, total) argument counts."""
        fields = dataclasses.fields(cls)  # type: ignore[arg-type]
        required = sum(
            1
            for f in fields
            if f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING
        )
        return required, len(fields)

    @classmethod
    def argument_names(cls) -> list[str]:
        return [f.name for f in dataclasses.fields(cls)]  # type: ignore[arg-type]


class EndpointRegistry:
    """Registry of endpoint request classes keyed by symbolic name.

    Note: Uses lazy initialization to avoid class-level mutable state issues.
    """

    _endpoints: dict[str, type[EndpointRequest]] | None = None

    @classmethod
    def _ensure_initialized(cls) -> None:
        """Ensure registry is initialized (lazy initialization)."""
        if cls._endpoints is None:
            cls._endpoints = {}

    @classmethod
    def register(cls, endpoint_class: type[EndpointRequest]) -> None:
        """Register an endpoint class under its symbolic name."""
        cls._ensure_initialized()
        assert cls._endpoints is not None  # For type checker
        if endpoint_class.name in cls._endpoints:
            logger.warning(
                f"Endpoint '{endpoint_class.name}' already registered, overwriting"
            )
        cls._endpoints[endpoint_class.name] = endpoint_class
        logger.debug(f"Registered endpoint: {endpoint_class.name}")

    @classmethod
    def get(cls, name: str) -> type[EndpointRequest]:
        """
        Get an endpoint class by name.

        Raises:
            UnknownEndpointError: If no endpoint has that name
        """
        cls._ensure_initialized()
        assert cls._endpoints is not None  # For type checker
        try:
            return cls._endpoints[name]
        except KeyError:
            raise UnknownEndpointError(f'Unknown Steam API endpoint "{name}"') from None

    @classmethod
    def names(cls) -> list[str]:
        """Get all registered endpoint names."""
        cls._ensure_initialized()
        assert cls._endpoints is not None  # For type checker
        return list(cls._endpoints)

    @classmethod
    def resolve(cls, name: str, *args: Any) -> EndpointRequest:
        """
        Build a request for a symbolic endpoint name.

        Args:
            name: Symbolic endpoint name (e.g. "playerSummaries")
            *args: Positional endpoint arguments

        Returns:
            EndpointRequest instance

        Raises:
            UnknownEndpointError: If the name is not registered
            ArgumentCountError: If the argument count does not match
        """
        endpoint_class = cls.get(name)
        required, total = endpoint_class.arity()
        if not required <= len(args) <= total:
            expected = str(required) if required == total else f"{required}-{total}"
            raise ArgumentCountError(
                f'Endpoint "{name}" takes {expected} argument(s) '
                f"({', '.join(endpoint_class.argument_names())}), got {len(args)}"
            )
        return endpoint_class(*args)

    @classmethod
    def clear(cls) -> None:
        """Clear all registered endpoints (useful for testing)."""
        cls._endpoints = {}


def endpoint(
    name: str,
    interface: str,
    method: str,
    version: str,
    requires_key: bool = True,
) -> Callable[[E], E]:
    """
    Decorator to register an endpoint request class.

    Apply it on top of @dataclass(frozen=True).

    Args:
        name: Symbolic endpoint name (should be unique across all endpoints)
        interface: Steam API interface
        method: API method
        version: Version path segment
        requires_key: False for the public endpoints that are called without a key

    Returns:
        Decorated class
    """

    def decorator(cls: E) -> E:
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass")
        cls.name = name
        cls.interface = interface
        cls.method = method
        cls.version = version
        cls.requires_key = requires_key
        EndpointRegistry.register(cls)
        return cls

    return decorator


def resolve(name: str, *args: Any) -> EndpointRequest:
    """Shortcut for EndpointRegistry.resolve()."""
    return EndpointRegistry.resolve(name, *args)
