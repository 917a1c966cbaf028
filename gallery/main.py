import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from gallery.deps import get_settings
from gallery.routers.page import router as page_router

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format=LOG_FORMAT,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Load settings before serving; a ConfigurationError aborts startup."""
    settings = get_settings()
    logger.info(
        "Serving bucket %r (prefix %r) via %s",
        settings.s3_bucket_name,
        settings.s3_prefix,
        "CDN" if settings.cdn_domain else "presigned URLs",
    )
    yield


app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)

app.include_router(page_router)

__all__ = ["app"]
