"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courselib.config import settings

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

from courselib.database import create_schema  # noqa: E402
from courselib.exception_handlers import register_exception_handlers  # noqa: E402
from courselib.mapping.author import register_property_mappings  # noqa: E402
from courselib.routes import author_collections, authors, courses, root  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: register mappings and ensure the schema exists."""
    register_property_mappings()
    await create_schema()
    logger.info("Database schema ensured")

    yield  # Application runs here


app = FastAPI(
    title="Course Library API",
    description="Paged, sortable and shapeable author and course resources",
    version="0.1.0",
    lifespan=lifespan,
)

_cors_origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Accept", "Content-Type"],
    expose_headers=["X-Pagination", "Location"],
)

register_exception_handlers(app)

app.include_router(root.router, prefix="/api")
app.include_router(authors.router, prefix="/api")
app.include_router(courses.router, prefix="/api")
app.include_router(author_collections.router, prefix="/api")


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}
