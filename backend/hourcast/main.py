"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hourcast import __version__
from hourcast.config import Settings, settings as default_settings
from hourcast.errors import HourcastError, InvalidInput, StorageUnavailable, UploadTooLarge
from hourcast.logging_config import configure_logging
from hourcast.schemas.common import HealthResponse
from hourcast.services import build_services

logger = logging.getLogger(__name__)

# Allowance for multipart boundaries and text fields around the audio part
MULTIPART_OVERHEAD_BYTES = 1024 * 1024


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build an application bound to ``settings`` (module settings by default)."""
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the service objects once for the life of the process."""
        app.state.services = build_services(settings)
        logger.info(
            "Serving uploads from %s, metadata at %s",
            settings.UPLOAD_DIR, settings.METADATA_PATH,
        )
        yield

    app = FastAPI(
        title="Hourcast API",
        version=__version__,
        description="Upload audio files and assign them to the hours of a day.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Persistence-Warning"],
    )

    @app.exception_handler(HourcastError)
    async def handle_hourcast_error(request: Request, exc: HourcastError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "code": exc.code},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
            message = f"{where}: {first.get('msg')}" if where else str(first.get("msg"))
        else:
            message = "malformed request"
        return await handle_hourcast_error(request, InvalidInput(message))

    @app.middleware("http")
    async def reject_oversized_upload(request: Request, call_next):
        """Refuse uploads whose declared length cannot fit, before the body is spooled."""
        if request.method == "POST" and request.url.path == "/api/upload":
            declared = request.headers.get("content-length", "")
            limit = settings.MAX_UPLOAD_BYTES + MULTIPART_OVERHEAD_BYTES
            if declared.isdigit() and int(declared) > limit:
                logger.warning("Rejected upload declaring %s bytes", declared)
                return await handle_hourcast_error(
                    request,
                    UploadTooLarge(f"file too large. maximum size is {settings.MAX_UPLOAD_BYTES} bytes"),
                )
        return await call_next(request)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Verify the upload directory can be read."""
        try:
            await request.app.state.services.blobs.list_identifiers()
        except StorageUnavailable as e:
            return {"status": "error", "detail": e.message}
        return {"status": "ok"}

    # Register routers; the front-end catch-all goes last
    from hourcast.routes.files import router as files_router
    from hourcast.routes.playlist import router as playlist_router
    from hourcast.routes.frontend import router as frontend_router
    app.include_router(files_router)
    app.include_router(playlist_router)
    app.include_router(frontend_router)

    return app


app = create_app()
