import os

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

# Applied to the credential-accepting form posts (login, signup)
AUTH_RATE_LIMIT = os.getenv("AUTH_RATE_LIMIT", "10/minute")


def form_client_key(request: Request) -> str:
    """
    Key function for SlowAPI.
    Login and signup are unauthenticated, so the only stable key is the client
    address (handles proxies if X-Forwarded-For is set correctly by Uvicorn).
    """
    return f"ip:{get_remote_address(request)}"


def rate_limit_disabled(request: Request) -> bool:
    """Per-app switch: apps built with rate limiting off are exempt from AUTH_RATE_LIMIT."""
    return not request.app.state.settings.rate_limit_enabled


limiter = Limiter(key_func=form_client_key)
