import logging
import logging.config
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import get_settings
from app.dependencies import close_store
from app.routers.seo import limiter, router as seo_router
from app.routers.sitemap import router as sitemap_router
from app.services.content_store import ContentNotFoundError

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": get_settings().log_level, "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Close the content store's HTTP connections on shutdown."""
    yield
    await close_store()
    logger.info("Content store closed")


app = FastAPI(
    title="AdWrap SEO Bridge",
    description=(
        "Normalizes SEO data stored by whichever WordPress SEO plugin is active "
        "into one complete record for the headless frontend."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ContentNotFoundError)
async def not_found_handler(request: Request, exc: ContentNotFoundError) -> JSONResponse:
    logger.info("Not found: %s", exc)
    return JSONResponse(
        status_code=404,
        content={"code": "not_found", "message": str(exc), "data": {"status": 404}},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(seo_router)
app.include_router(sitemap_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from AdWrap SEO Bridge"}
