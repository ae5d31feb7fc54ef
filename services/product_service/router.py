from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from services.auth_service.dependencies import get_session_user, login_redirect
from services.auth_service.schemas import CurrentUser
from services.cart_service.service import CartService
from shared.config.database import get_db, ping
from shared.errors import ProductNotFound
from shared.web.rendering import render

from .schemas import IndexPage, ProductPage, ProductResponse, ProductSummary
from .service import ProductService

router = APIRouter(tags=["Catalog"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)


@public_router.get("/health", include_in_schema=False)
async def health_check(request: Request):
    database = await ping(request.app.state.engine)
    return {"service": request.app.state.settings.service_name, "status": "running", "database": database}


# products.id is an Integer column: signed 32-bit on Postgres, and well inside SQLite's 64-bit range
MAX_PRODUCT_ID = 2**31 - 1


def _parse_product_id(raw: str) -> int:
    try:
        product_id = int(raw)
    except (TypeError, ValueError):
        raise ProductNotFound(raw)
    if not -MAX_PRODUCT_ID - 1 <= product_id <= MAX_PRODUCT_ID:
        raise ProductNotFound(raw)
    return product_id


async def _product_page(db: AsyncSession, product_id: int, user: Optional[CurrentUser]) -> ProductPage:
    product = await ProductService.get_product(db, product_id)
    in_cart = 0
    if user and user.user_id is not None:
        in_cart = await CartService.count_items(db, user.user_id, product_id)
    return ProductPage(
        username=user.username if user else "",
        product=ProductResponse.model_validate(product),
        in_cart=in_cart,
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    user: Optional[CurrentUser] = Depends(get_session_user),
    db: AsyncSession = Depends(get_db),
):
    products = await ProductService.list_products(db)
    page = IndexPage(
        username=user.username if user else "",
        products=[ProductSummary.model_validate(p) for p in products],
    )
    return render(request, "index.html", page)


@router.get("/product", response_class=HTMLResponse)
async def product_detail(
    request: Request,
    product_id: str = Query("", alias="id"),
    user: Optional[CurrentUser] = Depends(get_session_user),
    db: AsyncSession = Depends(get_db),
):
    page = await _product_page(db, _parse_product_id(product_id), user)
    return render(request, "product.html", page)


@router.post("/product", response_class=HTMLResponse)
async def add_to_cart(
    request: Request,
    product_id: str = Query("", alias="id"),
    user: Optional[CurrentUser] = Depends(get_session_user),
    db: AsyncSession = Depends(get_db),
):
    pid = _parse_product_id(product_id)
    # 404 before anything is written, so no cart row points at a missing product
    await ProductService.get_product(db, pid)

    if user is None:
        return render(request, "product.html", await _product_page(db, pid, user))
    if user.user_id is None:
        raise login_redirect()

    await CartService.add_item(db, user.user_id, pid)
    return RedirectResponse(url="/cart", status_code=status.HTTP_303_SEE_OTHER)
