from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.errors import DuplicateUsername, InvalidCredentials, InvalidSignup, StoreError
from shared.security import AUTH_RATE_LIMIT, limiter, rate_limit_disabled
from shared.web.rendering import render

from .dependencies import get_session_cookie
from .schemas import AuthFormPage
from .service import AuthService

router = APIRouter(tags=["Authentication"])


@router.get("/signup", response_class=HTMLResponse)
async def signup_form(request: Request):
    return render(request, "signup.html", AuthFormPage())


@router.post("/signup", response_class=HTMLResponse)
@limiter.limit(AUTH_RATE_LIMIT, exempt_when=rate_limit_disabled)
async def signup(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    try:
        await AuthService.create_user(db, username, password)
    except (DuplicateUsername, InvalidSignup) as e:
        return render(request, "signup.html", AuthFormPage(error=e.message, form_username=username))
    except StoreError:
        return render(
            request,
            "signup.html",
            AuthFormPage(error="Could not create your account, please try again.", form_username=username),
        )
    return RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/login", response_class=HTMLResponse)
async def login_form(request: Request):
    return render(request, "login.html", AuthFormPage())


@router.post("/login", response_class=HTMLResponse)
@limiter.limit(AUTH_RATE_LIMIT, exempt_when=rate_limit_disabled)
async def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    try:
        user = await AuthService.verify_credentials(db, username, password)
    except InvalidCredentials as e:
        return render(request, "login.html", AuthFormPage(error=e.message, form_username=username))

    resp = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    get_session_cookie(request).issue(resp, user.username, user.id)
    return resp


@router.get("/logout")
async def logout(request: Request):
    resp = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    get_session_cookie(request).clear(resp)
    return resp
