# ednc/main.py
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ednc.api import auth, catalog, courses, students
from ednc.core.config import settings
from ednc.core.exceptions import RosterError, StorageFailure, ValidationFailed
from ednc.core.logging_config import setup_logging
from ednc.core.rate_limit import create_limiter, install_rate_limiting
from ednc.db import Base
from ednc.db.session import engine

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES_ON_STARTUP:
        Base.metadata.create_all(bind=engine)
    logger.info(f"🚀 Roster service started, database: {engine.url.render_as_string(hide_password=True)}")
    yield


app = FastAPI(title="ED&C Course Registration", lifespan=lifespan)

limiter = create_limiter()
install_rate_limiting(app, limiter)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


@app.exception_handler(RosterError)
async def roster_error_handler(request: Request, exc: RosterError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "Invalid input")
        message = f"{field}: {message}" if field else message
    else:
        message = None
    return JSONResponse(status_code=400, content=ValidationFailed(message).to_dict())


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"❌ [DB] {request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=StorageFailure().to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"🔥 Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "code": "INTERNAL_ERROR"},
    )


app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
# public catalog, no token required
app.include_router(catalog.router, prefix="/api/courses/public", tags=["catalog"])
app.include_router(courses.router, prefix="/api/courses", tags=["courses"])
app.include_router(students.router, prefix="/api/students", tags=["students"])


@app.get("/health", tags=["health"])
def health_check():
    return {"status": "OK", "message": "ED&C course registration server is running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("ednc.main:app", host="0.0.0.0", port=5000)
