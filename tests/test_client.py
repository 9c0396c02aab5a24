"""Tests for Client."""

from unittest.mock import MagicMock

import pytest

from jira_session import Client, ConfigurationError, HttpTransport, SessionManager
from jira_session.logging_config import (
    AuthenticationFailedError,
    JiraSessionError,
    UnexpectedStatusError,
)
from jira_session.session.models import Session, SessionCookie


class TestClientSetup:
    """Tests for client construction."""

    def test_from_base_url(self):
        """Should build its own transport from a base URL."""
        with Client("https://jira.example.com") as client:
            assert isinstance(client.transport, HttpTransport)
            assert str(client.transport.base_url) == "https://jira.example.com/"

    def test_requires_base_url_or_transport(self):
        """Should raise ConfigurationError with neither."""
        with pytest.raises(ConfigurationError):
            Client()

    def test_rejects_both(self):
        """Should raise ConfigurationError with both."""
        with pytest.raises(ConfigurationError):
            Client("https://jira.example.com", transport=MagicMock())

    def test_starts_without_session(self, client):
        """Should hold no session and an attached manager."""
        assert client.session is None
        assert isinstance(client.authentication, SessionManager)
        assert client.authentication.is_initialized is True

    def test_clients_do_not_share_sessions(self, client):
        """Should keep session state per client."""
        other = Client(transport=MagicMock())
        client._set_session(Session(name="fred"))

        assert other.session is None
        assert other.authentication.authenticated() is False

    def test_session_is_a_copy(self, client):
        """Should not let changes to the returned session reach the stored one."""
        client._set_session(
            Session(name="fred", cookies=[SessionCookie(name="JSESSIONID", value="abc")])
        )

        copy = client.session
        copy.cookies.append(SessionCookie(name="evil", value="1"))
        copy.cookies[0].value = "tampered"
        copy.name = "mallory"

        assert client.session.name == "fred"
        assert client.new_request("GET", "x").headers["Cookie"] == "JSESSIONID=abc"

    def test_close_releases_transport(self):
        """Should close the transport on exit."""
        transport = MagicMock()

        with Client(transport=transport):
            pass

        transport.close.assert_called_once()


class TestNewRequest:
    """Tests for building requests through the client."""

    def test_attaches_session_cookies(self, client):
        """Should send the stored cookies on any request."""
        client._set_session(
            Session(cookies=[SessionCookie(name="JSESSIONID", value="abc")])
        )

        request = client.new_request("GET", "rest/api/2/issue/ABC-1")

        assert request.headers["Cookie"] == "JSESSIONID=abc"
        assert str(request.url) == "https://jira.example.com/rest/api/2/issue/ABC-1"

    def test_no_session_no_cookies(self, client):
        """Should send no Cookie header without a session."""
        request = client.new_request("GET", "rest/api/2/issue/ABC-1")
        assert "Cookie" not in request.headers

    def test_do_delegates_to_transport(self):
        """Should pass the request, model and stream flag to the transport."""
        transport = MagicMock()
        transport.execute.return_value = ("response", None)
        client = Client(transport=transport)
        request = MagicMock()

        result = client.do(request, Session, stream=True)

        transport.execute.assert_called_once_with(request, Session, stream=True)
        assert result == ("response", None)


class TestErrors:
    """Tests for error types."""

    def test_common_base(self):
        """Should let callers catch every failure with one type."""
        assert issubclass(AuthenticationFailedError, JiraSessionError)
        assert issubclass(ConfigurationError, JiraSessionError)

    def test_authentication_failed_fields(self):
        """Should carry status, messages and cookies."""
        error = AuthenticationFailedError(
            403, messages=["CAPTCHA required"], cookies=["c"]
        )

        assert error.status_code == 403
        assert error.messages == ["CAPTCHA required"]
        assert error.cookies == ["c"]
        assert "403" in str(error)
        assert "CAPTCHA required" in str(error)

    def test_unexpected_status_fields(self):
        """Should carry the status code."""
        error = UnexpectedStatusError("logout failed", status_code=500)
        assert error.status_code == 500
