"""HTTP transport."""

from .http import HttpTransport, cookies_from_response, error_messages

__all__ = ["HttpTransport", "cookies_from_response", "error_messages"]
