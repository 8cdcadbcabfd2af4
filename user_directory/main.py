from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_directory.api.routes import dashboard, health, users
from user_directory.core.config import get_settings
from user_directory.core.logging import setup_logging
from user_directory.telemetry import setup_prometheus


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router, prefix="/api")
    app.include_router(dashboard.router)

    if settings.enable_prometheus_metrics:
        setup_prometheus(app)

    return app


app = create_app()
