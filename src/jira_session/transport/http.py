"""HTTP transport for the JIRA REST API using httpx."""

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_TIMEOUT, USER_AGENT
from ..logging_config import (
    DecodeError,
    RequestConstructionError,
    TransportError,
    get_logger,
)
from ..session.models import SessionCookie

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class HttpTransport:
    """Builds and sends requests relative to a JIRA base URL."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ):
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = httpx.URL(base_url)
        self.timeout = timeout
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    def build_request(
        self,
        method: str,
        path: str,
        body: dict | None = None,
        cookies: str = "",
    ) -> httpx.Request:
        """Build a request for a path relative to the base URL.

        The request is created directly rather than through the httpx client
        so the client's own cookie jar is never merged in. Session cookies
        are only the ones passed here.
        """
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        if cookies:
            headers["Cookie"] = cookies
        try:
            url = self.base_url.join(path.lstrip("/"))
            if body is not None:
                return httpx.Request(method, url, headers=headers, json=body)
            return httpx.Request(method, url, headers=headers)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            logger.error(f"Could not build {method} request for '{path}': {e}")
            raise RequestConstructionError(
                f"Could not build {method} request for '{path}': {e}", cause=e
            ) from e

    def execute(
        self,
        request: httpx.Request,
        model: type[ModelT] | None = None,
        stream: bool = False,
    ) -> tuple[httpx.Response, ModelT | None]:
        """Send a request and optionally decode a successful body into ``model``.

        Any received response is returned regardless of its status code.

        Raises:
            TransportError: If no response was received.
            DecodeError: If a 2xx body does not match ``model``.
        """
        logger.debug(f"{request.method} {request.url}")
        try:
            response = self._http.send(request, stream=stream)
        except httpx.TransportError as e:
            logger.error(f"{request.method} {request.url} failed: {e}")
            raise TransportError(
                f"Error sending {request.method} request to {request.url}: {e}",
                cause=e,
            ) from e
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if model is None or stream or not response.is_success or not response.content:
            return response, None

        try:
            return response, model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Invalid {model.__name__} body from {request.url}: {e}")
            raise DecodeError(
                f"Could not decode {model.__name__} from response: {e}", cause=e
            ) from e

    def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def cookies_from_response(response: httpx.Response) -> list[SessionCookie]:
    """Cookies set by a response, in the order the service sent them."""
    default_domain = response.request.url.host
    cookies = []
    for header in response.headers.get_list("set-cookie"):
        cookie = SessionCookie.from_set_cookie(header, default_domain)
        if cookie is None:
            logger.warning("Ignoring Set-Cookie header without a cookie name")
            continue
        cookies.append(cookie)
    return cookies


def error_messages(response: httpx.Response) -> list[str]:
    """Collect JIRA's ``errorMessages`` and ``errors`` from an error body."""
    try:
        data = response.json()
    except (ValueError, httpx.ResponseNotRead):
        return []
    if not isinstance(data, dict):
        return []
    messages = [str(m) for m in data.get("errorMessages") or []]
    errors = data.get("errors") or {}
    if isinstance(errors, dict):
        messages.extend(f"{field}: {msg}" for field, msg in errors.items())
    return messages
