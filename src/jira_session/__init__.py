"""Cookie-session authentication for the JIRA REST API."""

from .client import Client
from .logging_config import (
    AuthenticationFailedError,
    ConfigurationError,
    DecodeError,
    JiraSessionError,
    NotAuthenticatedError,
    RequestConstructionError,
    ResponseReadError,
    TransportError,
    UnexpectedStatusError,
)
from .session import LoginInfo, Session, SessionCookie, SessionManager, SessionToken
from .transport import HttpTransport

__version__ = "0.1.0"

__all__ = [
    "Client",
    "HttpTransport",
    "SessionManager",
    "Session",
    "SessionToken",
    "SessionCookie",
    "LoginInfo",
    # Errors
    "JiraSessionError",
    "ConfigurationError",
    "NotAuthenticatedError",
    "RequestConstructionError",
    "TransportError",
    "AuthenticationFailedError",
    "UnexpectedStatusError",
    "ResponseReadError",
    "DecodeError",
]
