"""Session cookie issue/read/clear.

Two modes, picked from settings:

- plain (no ``SESSION_SECRET_KEY``): the cookie value is the username, percent-encoded
  so any name fits a latin-1 header, and is trusted as-is. A client can forge any
  identity in this mode.
- signed: the cookie carries an HS256 JWT ``{"sub": username, "uid": id, "exp": ...}``.
  Tampered or expired tokens read as no session.
"""
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional
from urllib.parse import quote, unquote

from fastapi import Request, Response

from shared.config.settings import Settings
from .jwt_handler import create_access_token, verify_access_token


@dataclass(frozen=True)
class SessionIdentity:
    username: str
    user_id: Optional[int] = None


class SessionCookie:

    def __init__(self, settings: Settings):
        self.name = settings.cookie_name
        self.secure = settings.cookie_secure
        self._secret = settings.session_secret
        self._max_age = timedelta(minutes=settings.session_max_age_minutes)

    @property
    def signed(self) -> bool:
        return bool(self._secret)

    def encode(self, username: str, user_id: Optional[int] = None) -> str:
        if not self.signed:
            return quote(username, safe="")
        claims = {"sub": username}
        if user_id is not None:
            claims["uid"] = user_id
        return create_access_token(claims, self._secret, expires_delta=self._max_age)

    def decode(self, value: str) -> Optional[SessionIdentity]:
        if not value:
            return None
        if not self.signed:
            return SessionIdentity(username=unquote(value))
        payload = verify_access_token(value, self._secret)
        if not payload or not payload.get("sub"):
            return None
        uid = payload.get("uid")
        return SessionIdentity(username=str(payload["sub"]), user_id=int(uid) if uid is not None else None)

    def issue(self, response: Response, username: str, user_id: Optional[int] = None) -> str:
        """Attach a session-lifetime cookie (no max-age) for ``username`` to the response."""
        value = self.encode(username, user_id)
        response.set_cookie(
            self.name,
            value,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )
        return value

    def read_identity(self, request: Request) -> Optional[SessionIdentity]:
        return self.decode(request.cookies.get(self.name, ""))

    def read(self, request: Request) -> str:
        """Username carried by the request's cookie, or "" when there is none."""
        identity = self.read_identity(request)
        return identity.username if identity else ""

    def clear(self, response: Response) -> None:
        response.delete_cookie(self.name, path="/", httponly=True, secure=self.secure, samesite="lax")
