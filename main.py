from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from shared.config.database import build_engine, build_sessionmaker, create_tables
from shared.config.settings import Settings, get_settings
from shared.observability import setup_observability
from shared.security import SessionCookie, limiter
from shared.web.error_handlers import register_error_handlers
from shared.web.rendering import build_templates

# IMPORTANT: import models so they register with Base
from services.auth_service import models as auth_models  # noqa: F401
from services.product_service import models as product_models  # noqa: F401
from services.cart_service import models as cart_models  # noqa: F401

from services.auth_service.router import router as auth_router
from services.cart_service.router import router as cart_router
from services.product_service.router import public_router, router as product_router
from services.product_service.service import ProductService

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    try:
        await create_tables(engine)
        async with app.state.sessionmaker() as db:
            await ProductService.seed(db)
    except Exception as e:
        # without a usable store the process must not start serving
        logger.critical("database_init_failed", database=engine.url.render_as_string(hide_password=True), error=str(e))
        raise
    logger.info("storefront_started", database=engine.url.render_as_string(hide_password=True))
    yield
    await engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Storefront", version="1.0.0", lifespan=lifespan)

    # --- APPLICATION CONTEXT ---
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.sessionmaker = build_sessionmaker(app.state.engine)
    app.state.templates = build_templates(settings)
    app.state.session_cookie = SessionCookie(settings)

    # --- OBSERVABILITY BOOTSTRAP ---
    setup_observability(app, settings)

    # --- SECURITY SETUP ---
    # one process-wide limiter; settings.rate_limit_enabled is checked per request
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_error_handlers(app)

    app.include_router(public_router)
    app.include_router(product_router)
    app.include_router(auth_router)
    app.include_router(cart_router)
    app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
