# gymfeedback/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from gymfeedback.core.config import get_settings
from gymfeedback.core.errors import PersistenceError, ValidationError
from gymfeedback.core.logging import setup_logging
from gymfeedback.api.v1.routers.professors import router as professors_router
from gymfeedback.api.v1.routers.submissions import router as submissions_router
from gymfeedback.api.v1.routers.stats import router as stats_router
from gymfeedback.api.v1.routers.catalog import router as catalog_router

from gymfeedback.middleware.error_handler import (
    http_error_handler,
    persistence_error_handler,
    validation_error_handler,
)
from gymfeedback.middleware.request_id import RequestIDMiddleware
from gymfeedback.middleware.request_timing import RequestTimingMiddleware


def create_app() -> FastAPI:
    # raises ConfigurationError when SUPABASE_URL / SUPABASE_ANON_KEY are missing
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",")] if settings.cors_origins else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(professors_router)
    app.include_router(submissions_router)
    app.include_router(stats_router)
    app.include_router(catalog_router)

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def _validation_exc_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(Exception, http_error_handler)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


app = create_app()
