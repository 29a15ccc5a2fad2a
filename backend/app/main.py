"""
Profile Registry Backend - FastAPI Application

Profile registration and document-id login with bearer tokens.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.errors import (
    ConflictError,
    InvalidTokenError,
    ProfileServiceError,
    ProfileValidationError,
)
from app.database.connections import get_mongo_client, close_connections
from app.database.registry import create_indexes
from app.routers import auth, health, users
from app.schemas.profile import ErrorResponse, FieldErrorDetail

# Fails here, before the app exists, when JWT_SECRET_KEY is not configured
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("profile_registry")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize database connection
    - Create indexes (the unique ones back the duplicate checks)

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up Profile Registry Backend...")

    try:
        client = await get_mongo_client()
        await create_indexes(client)
    except Exception as e:
        logger.warning("Database initialization failed, indexes not ensured: %s", e)

    yield

    logger.info("Shutting down Profile Registry Backend...")
    await close_connections()


app = FastAPI(
    title="Profile Registry API",
    description="""
## Profile Registry API

Registration and login service for a public sign-up form.

### Features
- **Registration**: validated, normalized profile records with unique document id and email
- **Login**: by document id, refreshes the last-seen timestamp
- **Profiles**: read, update, deactivate own profile

### Authentication
Protected endpoints require the token returned by register/login:
```
Authorization: Bearer <token>
```
Tokens are valid for 24 hours.
    """,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


def error_response(status_code: int, body: ErrorResponse, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers=headers,
    )


@app.exception_handler(ProfileValidationError)
async def validation_error_handler(request: Request, exc: ProfileValidationError):
    return error_response(
        exc.status_code,
        ErrorResponse(
            message=exc.message,
            errors=[FieldErrorDetail(field=e.field, message=e.message) for e in exc.errors],
        ),
    )


@app.exception_handler(ConflictError)
async def conflict_error_handler(request: Request, exc: ConflictError):
    return error_response(exc.status_code, ErrorResponse(message=exc.message, field=exc.field))


@app.exception_handler(InvalidTokenError)
async def invalid_token_handler(request: Request, exc: InvalidTokenError):
    return error_response(
        exc.status_code,
        ErrorResponse(message=exc.message),
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(ProfileServiceError)
async def service_error_handler(request: Request, exc: ProfileServiceError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc.__cause__)
        return error_response(
            exc.status_code,
            ErrorResponse(
                message="Internal server error",
                error=str(exc.__cause__ or exc) if settings.debug else None,
            ),
        )
    return error_response(exc.status_code, ErrorResponse(message=exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(
        400,
        ErrorResponse(
            message="Invalid input data",
            errors=[FieldErrorDetail(field="body", message="Request body must be valid JSON")],
        ),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        500,
        ErrorResponse(
            message="Internal server error",
            error=str(exc) if settings.debug else None,
        ),
    )


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Profile Registry API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
