"""Logging configuration and error types for jira-session.

Provides a configured logger that writes to ~/.jira-session/jira-session.log
"""

import logging

from .config import LOG_DIR, LOG_FILE, ensure_dirs


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured logger that writes to the jira-session log file
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        ensure_dirs()

        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


class JiraSessionError(Exception):
    """Base exception for jira-session errors."""

    pass


class ConfigurationError(JiraSessionError):
    """The client or session manager is not set up."""

    pass


class NotAuthenticatedError(JiraSessionError):
    """A session-dependent operation was called with no stored session."""

    pass


class RequestConstructionError(JiraSessionError):
    """The request could not be built."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class TransportError(JiraSessionError):
    """Network-level failure, no response was received."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class AuthenticationFailedError(JiraSessionError):
    """The login request completed with a status other than 200.

    ``cookies`` holds whatever the failed response set. They are kept for
    diagnostics only and never become the active session.
    """

    def __init__(
        self,
        status_code: int,
        messages: list[str] | None = None,
        cookies: list | None = None,
    ):
        detail = f": {'; '.join(messages)}" if messages else ""
        super().__init__(
            f"Authentication failed with status {status_code}{detail}"
        )
        self.status_code = status_code
        self.messages = messages or []
        self.cookies = cookies or []


class UnexpectedStatusError(JiraSessionError):
    """A session request completed with a status other than the expected one."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ResponseReadError(JiraSessionError):
    """The response body could not be read."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class DecodeError(JiraSessionError):
    """The response body is not the expected JSON shape."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
