from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from product_browser.core.config import get_settings
from product_browser.core.errors import CatalogError
from product_browser.core.lifespan import lifespan
from product_browser.api.v1.routers.products import router as products_router
from product_browser.api.v1.routers.health import router as health_router
from product_browser.core.logging import configure_logging

import logging

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    # ------- CORS -------
    # ALLOWED_ORIGINS from env (CSV). Example:
    # ALLOWED_ORIGINS="https://shop.example.com,http://localhost:5173"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins or [
            # fallback for the local dev frontend
            "http://localhost:5173",
            "http://localhost:3000",
        ],
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        max_age=86400,
    )

    # ------- Errors -------
    # Callers only ever see {"error": <fixed message>}; causes are logged where raised.
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # ------- Routes -------
    app.include_router(health_router)
    app.include_router(products_router, prefix=settings.api_prefix)   # /api/products, /api/products/{id}
    return app


app = create_app()
