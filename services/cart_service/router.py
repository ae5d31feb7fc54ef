from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from services.auth_service.dependencies import require_user
from services.auth_service.schemas import CurrentUser
from shared.config.database import get_db
from shared.web.rendering import render

from .schemas import CartPage
from .service import CartService

router = APIRouter(tags=["Cart"])


@router.get("/cart", response_class=HTMLResponse)
async def view_cart(
    request: Request,
    user: CurrentUser = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    items = await CartService.list_items(db, user.user_id)
    return render(request, "cart.html", CartPage(username=user.username, items=items))
