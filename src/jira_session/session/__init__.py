"""Session management."""

from .manager import SessionManager
from .models import LoginInfo, Session, SessionCookie, SessionToken

__all__ = ["SessionManager", "Session", "SessionToken", "SessionCookie", "LoginInfo"]
