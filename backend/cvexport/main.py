# cvexport/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cvexport.core.config import settings
from cvexport.core.logging_config import configure_logging
from cvexport.middleware.request_logging import RequestLoggingMiddleware
from cvexport.routers.health import router as health_router
from cvexport.routers.root import router as root_router
from cvexport.routers.cv_export import router as cv_export_router
from cvexport.core.exception_handlers import app_error_handler, unhandled_exception_handler
from cvexport.core import AppError

configure_logging()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://cv.example.com"
    allow_origins = _split_csv(settings.CORS_ALLOW_ORIGINS) or ["http://localhost:3000"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "x-request-id"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(cv_export_router)

    return app


app = create_app()
