import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import models so they're registered with SQLAlchemy Base before create_all
from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS
from .database import Base, engine
from .domain.customers import router as customers_router
from .domain.dashboard import router as dashboard_router
from .domain.heaters import router as heaters_router
from .domain.maintenances import router as maintenances_router
from .routes import auth_router, upload_router
from .shared.responses import error_response, format_validation_errors

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.ERROR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Torqr API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Schema violations become 400 with field-level details"""
    details = format_validation_errors(exc.errors())
    logger.warning(f"Validation error for {request.method} {request.url.path}: {details}")
    return error_response("Validation error", 400, details=details)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTPException (including our error types) as the failure envelope"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {exc.status_code}: {exc.detail}")
    return error_response(
        str(exc.detail),
        exc.status_code,
        details=getattr(exc, "details", None),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    """Anything else is logged with its stack trace and reported generically"""
    logger.exception(f"{request.method} {request.url.path} - Unhandled error: {exc}")
    return error_response("Internal server error", 500)


# CORS Configuration
logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth_router)
app.include_router(customers_router)
app.include_router(heaters_router)
app.include_router(maintenances_router)
app.include_router(dashboard_router)
app.include_router(upload_router)


@app.get("/")
def root():
    return {"message": "Torqr API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
