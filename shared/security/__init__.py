from .jwt_handler import create_access_token, verify_access_token
from .passwords import hash_password, verify_password
from .rate_limiter import AUTH_RATE_LIMIT, limiter, rate_limit_disabled
from .session_cookie import SessionCookie, SessionIdentity

__all__ = [
    "create_access_token",
    "verify_access_token",
    "hash_password",
    "verify_password",
    "AUTH_RATE_LIMIT",
    "limiter",
    "rate_limit_disabled",
    "SessionCookie",
    "SessionIdentity",
]
