"""Wedding Planner API."""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.services.broadcast import ConnectionRegistry
from app.storage import Storage, StorageError, create_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    if not app.state.settings.ws_require_auth:
        logger.warning(
            "WebSocket channel is unauthenticated: every connected client receives every user's events. "
            "Set WS_REQUIRE_AUTH=true to require an access token."
        )
    yield
    # Shutdown: release the storage backend
    app.state.storage.close()


def create_app(settings: Settings | None = None, storage: Storage | None = None) -> FastAPI:
    """Build the application with its storage backend and broadcast registry."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Plan your wedding: checklist, guests, budget, vendors and timeline",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage or create_storage(settings)
    app.state.broadcaster = ConnectionRegistry()

    # CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid request"})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Unhandled storage failure on {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    # Import and include routers
    from app.api import auth, dashboard, help_center, realtime, resources, uploads, wedding_settings

    app.include_router(auth.router, prefix="/api")
    app.include_router(wedding_settings.router, prefix="/api")
    for router in resources.routers:
        app.include_router(router, prefix="/api")
    app.include_router(dashboard.router, prefix="/api")
    app.include_router(help_center.router, prefix="/api")
    app.include_router(uploads.router, prefix="/api")
    app.include_router(realtime.router)

    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")

    return app


app = create_app()
