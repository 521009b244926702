from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging

from .api.doctors import router as doctors_router
from .api.patients import router as patients_router
from .core.config import settings
from .core.database import get_db, init_db, ping
from .core.exceptions import MalformedBody

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the document store on startup; the client lives until process exit."""
    logger.info("Starting Hospital Records Service...")
    logger.info(f"Using MongoDB database '{settings.get_database_name}'")

    if not settings.TESTING:
        try:
            init_db()
            logger.info("Document store reachable")
        except PyMongoError as e:
            logger.error(f"Failed to reach document store: {str(e)}")
            raise

    logger.info("Application startup complete")
    yield
    logger.info("Shutting down Hospital Records Service...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="Doctor and patient records backed by MongoDB",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Middleware setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    TrustedHostMiddleware,
    allowed_hosts=settings.ALLOWED_HOSTS
)

# Custom middleware for request logging and timing
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    # Log request
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.4f}s"
    )

    return response


def error_response(
    request: Request, status_code: int, error: str, message: str, headers=None, **extra
) -> JSONResponse:
    content = {"error": error, "message": message, "path": str(request.url.path)}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    error = getattr(exc, "error", None) or HTTPStatus(exc.status_code).phrase
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return error_response(
        request,
        exc.status_code,
        error,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
    malformed = MalformedBody(fields)
    return error_response(
        request,
        malformed.status_code,
        malformed.error,
        malformed.detail,
        fields=malformed.fields,
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.error(f"Internal server error: {str(exc)}")
    return error_response(
        request,
        500,
        "Internal Server Error",
        "An unexpected error occurred",
    )

# Include routers
app.include_router(doctors_router)
app.include_router(patients_router)

# Health check endpoint
@app.get("/health")
def health_check(db: Database = Depends(get_db)):
    """Health check endpoint, including a ping to the document store."""
    try:
        ping(db)
    except PyMongoError as e:
        logger.warning(f"Health check ping failed: {str(e)}")
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "timestamp": time.time(),
                "version": settings.VERSION,
            },
        )
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "version": settings.VERSION
    }

# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.VERSION,
        "resources": ["/doctor", "/patient"],
        "docs": "/docs",
        "health": "/health"
    }


def run():
    """Start the HTTP listener."""
    import uvicorn
    uvicorn.run(
        "hospital_records.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
