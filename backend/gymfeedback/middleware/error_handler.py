
import logging
from fastapi import Request
from fastapi.responses import JSONResponse

from gymfeedback.core.errors import PersistenceError, ValidationError

log = logging.getLogger("gymfeedback.error_handler")

async def persistence_error_handler(request: Request, exc: PersistenceError):
    log.error(
        "Storage request failed",
        extra={"path": str(request.url), "table": exc.table, "operation": exc.operation, "status": exc.status_code},
    )
    return JSONResponse(status_code=502, content={"detail": "storage unavailable"})

async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": [{**e, "loc": list(e["loc"])} for e in exc.errors]})

async def http_error_handler(request: Request, exc: Exception):
    log.exception("Unhandled error", extra={"path": str(request.url)})
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error", "error": str(exc)},
    )
