"""Shared fixtures: a scripted JIRA session endpoint behind httpx.MockTransport."""

import httpx
import pytest

from jira_session.client import Client
from jira_session.transport.http import HttpTransport

BASE_URL = "https://jira.example.com"
SESSION_URL = f"{BASE_URL}/rest/auth/1/session"


def session_body(name: str = "fred", login_count: int = 1) -> dict:
    """JSON body JIRA returns for rest/auth/1/session."""
    return {
        "self": f"{BASE_URL}/rest/api/latest/user?username={name}",
        "name": name,
        "session": {"name": "JSESSIONID", "value": "6E3487971234567896704A9EB4AE501F"},
        "loginInfo": {
            "failedLoginCount": 1,
            "loginCount": login_count,
            "lastFailedLoginTime": "2013-11-27T09:43:28.839+0000",
            "previousLoginTime": "2013-12-04T07:54:59.824+0000",
        },
    }


def login_response(
    cookies: tuple[str, ...] = ("JSESSIONID=abc123; Path=/", "atlassian.xsrf.token=xyz; Path=/"),
    **body_kwargs,
) -> httpx.Response:
    """A 200 login response setting the given cookies."""
    return httpx.Response(
        200,
        json=session_body(**body_kwargs),
        headers=[("set-cookie", c) for c in cookies],
    )


class FakeJira:
    """Replays queued responses and records every request it receives.

    A queued callable is called with the request and its return value is the
    response, so a test can act while the request is in flight.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._queue: list = []

    def queue(self, *items) -> None:
        self._queue.extend(items)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(request)
        return item


@pytest.fixture
def fake_jira():
    """A FakeJira with an empty response queue."""
    return FakeJira()


@pytest.fixture
def transport(fake_jira):
    """An HttpTransport wired to the fake JIRA."""
    http_client = httpx.Client(transport=httpx.MockTransport(fake_jira))
    transport = HttpTransport(BASE_URL, http_client=http_client)
    yield transport
    http_client.close()


@pytest.fixture
def client(transport):
    """A Client with no session."""
    return Client(transport=transport)


@pytest.fixture
def logged_in_client(client, fake_jira):
    """A Client holding a session for 'fred' with loginCount 5."""
    fake_jira.queue(login_response(login_count=5))
    client.authentication.acquire_session_cookie("fred", "secret")
    fake_jira.requests.clear()
    return client
