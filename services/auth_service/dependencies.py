from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.security.session_cookie import SessionCookie

from .schemas import CurrentUser
from .service import AuthService


def get_session_cookie(request: Request) -> SessionCookie:
    return request.app.state.session_cookie


async def get_session_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> Optional[CurrentUser]:
    """
    Resolve the session cookie to a user once per request.
    Signed tokens already carry the user id; a plain cookie is looked up by username.
    The username is reported even when no such user exists.
    """
    identity = get_session_cookie(request).read_identity(request)
    if identity is None:
        return None

    user_id = identity.user_id
    if user_id is None:
        user = await AuthService.get_user_by_username(db, identity.username)
        user_id = user.id if user else None

    return CurrentUser(username=identity.username, user_id=user_id)


def login_redirect() -> HTTPException:
    return HTTPException(status_code=status.HTTP_303_SEE_OTHER, headers={"Location": "/login"})


async def require_user(user: Optional[CurrentUser] = Depends(get_session_user)) -> CurrentUser:
    """Dependency for pages that need a known user; redirects to /login otherwise."""
    if user is None or user.user_id is None:
        raise login_redirect()
    return user
