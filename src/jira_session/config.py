"""Configuration constants and paths."""

from pathlib import Path

# Base directory for jira-session data
LOG_DIR = Path.home() / ".jira-session"
LOG_FILE = LOG_DIR / "jira-session.log"

# Session resource, relative to the instance base URL
SESSION_ENDPOINT = "rest/auth/1/session"

# Network round trip limit in seconds
DEFAULT_TIMEOUT = 30.0

USER_AGENT = "jira-session/0.1.0"


def ensure_dirs() -> None:
    """Create required directories if they don't exist."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
