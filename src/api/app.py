"""FastAPI application factory."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.error import ClientError, GENERIC_SERVER_MESSAGE
from src.api.routes import btw, contractors, expenses, invoices, statements, tenants, work_entries

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    """Create and configure the FastAPI application."""
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            from src.depends import create_tables

            await create_tables()
            logger.info("Database tables ensured")
        yield

    app = FastAPI(
        title="ZZP Billing Service",
        description="Work entry aggregation, weekly statements and legal invoice numbering",
        version="0.1.0",
        lifespan=lifespan,
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
            )
            return response

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                f"{request.method} {request.url.path} failed: {exc.error.code} {exc.error.reason}"
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": {"code": "INTERNAL_ERROR", "message": GENERIC_SERVER_MESSAGE}},
        )

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    app.include_router(work_entries.router, prefix=config.API_PREFIX)
    app.include_router(statements.router, prefix=config.API_PREFIX)
    app.include_router(invoices.router, prefix=config.API_PREFIX)
    app.include_router(contractors.router, prefix=config.API_PREFIX)
    app.include_router(tenants.router, prefix=config.API_PREFIX)
    app.include_router(expenses.router, prefix=config.API_PREFIX)
    app.include_router(btw.router, prefix=config.API_PREFIX)

    return app
