"""JIRA client holding the transport and the current session."""

import threading

import httpx
from pydantic import BaseModel

from .config import DEFAULT_TIMEOUT
from .logging_config import ConfigurationError, get_logger
from .session.manager import SessionManager
from .session.models import Session
from .transport.http import HttpTransport

logger = get_logger(__name__)


class Client:
    """A JIRA REST client with at most one cookie session.

    Session cookies are attached to every request built through
    :meth:`new_request`. Log in and out through :attr:`authentication`.

    Example::

        with Client("https://jira.example.com") as jira:
            jira.authentication.acquire_session_cookie("me", "secret")
            user = jira.authentication.get_current_user()
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: HttpTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if (base_url is None) == (transport is None):
            raise ConfigurationError("Pass exactly one of base_url or transport")
        self.transport = transport or HttpTransport(base_url, timeout=timeout)
        self.lock = threading.RLock()
        self._session: Session | None = None
        self.authentication = SessionManager(self)

    @property
    def session(self) -> Session | None:
        """A copy of the current session, or None when not logged in.

        Changing the copy does not affect the stored session.
        """
        with self.lock:
            if self._session is None:
                return None
            return self._session.model_copy(deep=True)

    def _set_session(self, session: Session | None) -> None:
        with self.lock:
            self._session = session

    def new_request(
        self, method: str, path: str, body: dict | None = None
    ) -> httpx.Request:
        """Build a request relative to the base URL, carrying the session cookies."""
        with self.lock:
            cookies = self._session.cookie_header() if self._session else ""
        return self.transport.build_request(method, path, body, cookies=cookies)

    def do(
        self,
        request: httpx.Request,
        model: type[BaseModel] | None = None,
        stream: bool = False,
    ) -> tuple[httpx.Response, BaseModel | None]:
        """Send a request, decoding a successful body into ``model`` if given."""
        return self.transport.execute(request, model, stream=stream)

    def close(self) -> None:
        """Release the transport."""
        self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
