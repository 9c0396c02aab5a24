"""Session lifecycle management.

JIRA API docs: https://docs.atlassian.com/jira/REST/latest/#auth/1/session
"""

from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from ..config import SESSION_ENDPOINT
from ..logging_config import (
    AuthenticationFailedError,
    ConfigurationError,
    DecodeError,
    NotAuthenticatedError,
    ResponseReadError,
    UnexpectedStatusError,
    get_logger,
)
from ..transport.http import cookies_from_response, error_messages
from .models import Session

if TYPE_CHECKING:
    from ..client import Client

logger = get_logger(__name__)


class SessionManager:
    """Manages the cookie session of one JIRA client.

    The session itself lives on the client. Every operation here holds the
    client's lock from its precondition checks until the session has been
    stored or cleared.
    """

    def __init__(self, client: "Client | None" = None):
        self._client = client

    @property
    def is_initialized(self) -> bool:
        """Whether a client is attached."""
        return self._client is not None

    def _require_client(self) -> "Client":
        if self._client is None:
            raise ConfigurationError("Session manager is not attached to a client")
        return self._client

    def _require_session(self, client: "Client") -> Session:
        session = client.session
        if session is None:
            raise NotAuthenticatedError("No user is authenticated yet")
        return session

    def acquire_session_cookie(self, username: str, password: str) -> bool:
        """Create a new session for a user in JIRA.

        On success the session and its cookies replace any previous session,
        and the cookies are attached to every later request of the client.

        Raises:
            ConfigurationError: If the manager has no client.
            RequestConstructionError: If the request could not be built.
            TransportError: If JIRA could not be reached.
            AuthenticationFailedError: If JIRA answered with a status other than 200.
            DecodeError: If the 200 body is not a session.
        """
        client = self._require_client()
        body = {"username": username, "password": password}

        with client.lock:
            request = client.new_request("POST", SESSION_ENDPOINT, body)
            response, session = client.do(request, Session)
            cookies = cookies_from_response(response)

            if response.status_code != 200:
                logger.warning(
                    f"Login for '{username}' failed with status {response.status_code}"
                )
                raise AuthenticationFailedError(
                    response.status_code,
                    messages=error_messages(response),
                    cookies=cookies,
                )

            if session is None:
                session = Session()
            session.cookies = cookies
            client._set_session(session)

        logger.info(f"Acquired session for '{username}' ({len(cookies)} cookies)")
        return True

    def authenticated(self) -> bool:
        """Report whether the client currently holds a session."""
        if self._client is None:
            return False
        return self._client.session is not None

    def logout(self) -> None:
        """Log out the current user and destroy the client's session.

        The stored session is only cleared once JIRA confirms with a 204.

        Raises:
            ConfigurationError: If the manager has no client.
            NotAuthenticatedError: If there is no session to log out of.
            RequestConstructionError: If the request could not be built.
            TransportError: If JIRA could not be reached.
            UnexpectedStatusError: If JIRA answered with a status other than 204.
        """
        client = self._require_client()

        with client.lock:
            session = self._require_session(client)
            request = client.new_request("DELETE", SESSION_ENDPOINT)
            response, _ = client.do(request)

            if response.status_code != 204:
                logger.warning(f"Logout failed with status {response.status_code}")
                raise UnexpectedStatusError(
                    f"The logout was unsuccessful with status {response.status_code}",
                    status_code=response.status_code,
                )

            client._set_session(None)

        logger.info(f"Logged out '{session.name}'")

    def get_current_user(self) -> Session:
        """Fetch the current user's session details from JIRA.

        Always returns what JIRA reports now, never the stored session.

        Raises:
            ConfigurationError: If the manager has no client.
            NotAuthenticatedError: If there is no session.
            RequestConstructionError: If the request could not be built.
            TransportError: If JIRA could not be reached.
            UnexpectedStatusError: If JIRA answered with a status other than 200.
            ResponseReadError: If the body could not be read.
            DecodeError: If the body is not a session.
        """
        client = self._require_client()

        with client.lock:
            self._require_session(client)
            request = client.new_request("GET", SESSION_ENDPOINT)
            response, _ = client.do(request, stream=True)

            try:
                try:
                    data = response.read()
                except httpx.HTTPError as e:
                    logger.error(f"Couldn't read current user response: {e}")
                    raise ResponseReadError(
                        f"Couldn't read body from the response: {e}", cause=e
                    ) from e

                if response.status_code != 200:
                    logger.warning(
                        f"Current user lookup failed with status {response.status_code}"
                    )
                    raise UnexpectedStatusError(
                        f"Getting user info failed with status {response.status_code}",
                        status_code=response.status_code,
                    )

                try:
                    return Session.model_validate_json(data)
                except ValidationError as e:
                    logger.error(f"Invalid current user response: {e}")
                    raise DecodeError(
                        f"Could not decode received user info: {e}", cause=e
                    ) from e
            finally:
                response.close()
