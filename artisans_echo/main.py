"""
Artisan's Echo API - FastAPI Application
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from artisans_echo.core.config import Settings, settings as default_settings
from artisans_echo.core.database import AppContext
from artisans_echo.core.exceptions import AppError, Conflict, InternalError, ValidationError
from artisans_echo.utils.responses import error_response

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def register_exception_handlers(app: FastAPI, app_settings: Settings) -> None:

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return error_response(exc.message, exc.detail, exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        problems = [
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        ]
        return error_response(ValidationError.error, problems, ValidationError.status_code)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f"Constraint violation on {request.method} {request.url.path}: {exc.orig}")
        return error_response(Conflict.error, status_code=Conflict.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))

    # Global Exception Handler to ensure CORS headers are always present on 500 errors
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")

        origin = request.headers.get("origin", "*")
        detail = str(exc) if app_settings.DEBUG else None

        return error_response(
            InternalError.error,
            detail,
            status_code=InternalError.status_code,
            headers={
                "Access-Control-Allow-Origin": origin,
                "Access-Control-Allow-Methods": "*",
                "Access-Control-Allow-Headers": "*",
            }
        )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; the store is connected in the lifespan"""
    app_settings = app_settings or default_settings
    configure_logging(app_settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context = AppContext(
            app_settings.DATABASE_URL,
            echo=app_settings.DATABASE_ECHO,
            retry_interval=app_settings.DATABASE_RETRY_INTERVAL,
        )
        if not context.connect():
            logger.warning("Starting in degraded mode: reads answer empty, writes answer 503 until the store connects")
        app.state.context = context
        logger.info(f"{app_settings.APP_NAME} started ({app_settings.APP_ENV})")
        try:
            yield
        finally:
            context.dispose()
            app.state.context = None

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="API for sharing, exploring and collecting artworks",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    register_exception_handlers(app, app_settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=app_settings.cors_origins_list != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint - health check"""
        return {
            "ok": True,
            "message": f"{app_settings.APP_NAME} Server is running",
            "environment": app_settings.APP_ENV
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "app": app_settings.APP_NAME,
            "environment": app_settings.APP_ENV
        }

    @app.get("/health/db", tags=["Health"])
    def db_health_check(request: Request):
        """Database connection health check"""
        context: Optional[AppContext] = getattr(request.app.state, "context", None)
        result = {"ready": bool(context and context.ready), "connection_test": False, "error": None}
        if context is None:
            result["error"] = "Database context not initialized"
            return result
        try:
            result["connection_test"] = context.ping()
            if not context.ready:
                result["ready"] = context.connect()
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            result["error"] = str(e) if app_settings.DEBUG else "Database ping failed"
        return result

    from artisans_echo.api import artworks, favorites, likes, stats, users

    app.include_router(users.router, tags=["Users"])
    app.include_router(artworks.router, tags=["Artworks"])
    app.include_router(likes.router, tags=["Likes"])
    app.include_router(favorites.router, tags=["Favorites"])
    app.include_router(stats.router, tags=["Stats"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "artisans_echo.main:app",
        host="0.0.0.0",
        port=default_settings.PORT,
        reload=default_settings.DEBUG
    )
