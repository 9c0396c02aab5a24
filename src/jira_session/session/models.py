"""Session data models."""

import time
from http.cookiejar import parse_ns_headers

from pydantic import BaseModel, ConfigDict, Field


class LoginInfo(BaseModel):
    """Login statistics reported by JIRA. Informational only."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    failed_login_count: int = Field(default=0, alias="failedLoginCount")
    login_count: int = Field(default=0, alias="loginCount")
    last_failed_login_time: str = Field(default="", alias="lastFailedLoginTime")
    previous_login_time: str = Field(default="", alias="previousLoginTime")


class SessionToken(BaseModel):
    """Cookie name and value identifying the session to JIRA."""

    name: str
    value: str = Field(repr=False)


class SessionCookie(BaseModel):
    """A cookie set by JIRA on the login response."""

    name: str
    value: str = Field(repr=False)
    domain: str = ""
    path: str = "/"
    secure: bool = False
    expires: int | None = None

    @classmethod
    def from_set_cookie(
        cls, header: str, default_domain: str = ""
    ) -> "SessionCookie | None":
        """Build from one ``Set-Cookie`` header value.

        Uses the same lenient Netscape parsing as the stdlib cookie jar: the
        first field is name=value, attribute names are case-insensitive and
        unknown attributes are ignored. Returns None for a header with no
        cookie name.
        """
        parsed = parse_ns_headers([header])
        if not parsed:
            return None
        (name, value), *attributes = parsed[0]
        attrs = dict(attributes)

        expires = attrs.get("expires")
        max_age = attrs.get("max-age")
        if max_age is not None:
            try:
                expires = int(time.time()) + int(max_age)
            except (TypeError, ValueError):
                pass

        return cls(
            name=name,
            value=value or "",
            domain=attrs.get("domain") or default_domain,
            path=attrs.get("path") or "/",
            secure="secure" in attrs,
            expires=int(expires) if expires is not None else None,
        )


class Session(BaseModel):
    """An authenticated JIRA session.

    Mirrors the JSON of ``rest/auth/1/session``. ``cookies`` never comes from
    the body: it is filled from the ``Set-Cookie`` headers of the login
    response and is what gets sent back on every later request.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    self_url: str | None = Field(default=None, alias="self")
    name: str | None = None
    session: SessionToken | None = None
    login_info: LoginInfo = Field(default_factory=LoginInfo, alias="loginInfo")
    cookies: list[SessionCookie] = Field(
        default_factory=list, exclude=True, repr=False
    )

    @property
    def token(self) -> tuple[str, str] | None:
        """The (cookie name, cookie value) pair JIRA reported, if any."""
        if self.session is None:
            return None
        return self.session.name, self.session.value

    def cookie_header(self) -> str:
        """Render the stored cookies as a ``Cookie`` header value."""
        return "; ".join(f"{c.name}={c.value}" for c in self.cookies)

    def to_wire(self) -> dict:
        """Serialize using JIRA's field names."""
        return self.model_dump(by_alias=True, exclude_none=True)
