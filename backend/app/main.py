"""
Shared Items Backend - FastAPI Application

A multi-user API where principals register, log in and manage shared items
under role- and ownership-based authorization.
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.exceptions import ServiceError, StoreError, ValidationError
from app.database.connections import close_store, get_store
from app.routers import auth, health, items, users

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the document store and check it is reachable

    Shutdown:
    - Close the document store
    """
    logger.info("Starting up Shared Items Backend...")

    try:
        store = await get_store()
        await store.ping()
        logger.info("Document store ready")
    except Exception as e:
        logger.warning(f"Document store initialization warning: {e}")

    yield

    logger.info("Shutting down Shared Items Backend...")
    await close_store()


# Create FastAPI application
app = FastAPI(
    title="Shared Items API",
    description="""
## Shared Items API

Register, log in, and manage a shared catalogue of items.

### Roles
- **admin**: list users, create items, modify or delete any item
- **creator**: create items, modify or delete own items
- **consumer**: list items

### Authentication
Protected endpoints require a JWT bearer token:
```
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /register` or `POST /login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Render service errors as ``{"error": message}``."""
    if isinstance(exc, StoreError):
        logger.error(
            f"Storage failure on {request.method} {request.url.path}: {exc}",
            exc_info=exc.__cause__ or exc,
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Render malformed or incomplete request bodies as 400 validation errors."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "; ".join(problems) or ValidationError.message
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"error": message},
    )


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(items.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Shared Items API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }


def serve():
    """Run the API with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()
