import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI

from app.routers import articles, posts
from app.routers import settings as settings_router
from app.security import get_api_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = create_http_client()
    logger.info("GitHub HTTP client opened")

    try:
        yield
    finally:
        await app.state.http_client.aclose()
        logger.info("GitHub HTTP client closed")


app = FastAPI(
    title="Zola Publisher API",
    description="Compose, preview and publish Zola posts to GitHub",
    lifespan=lifespan,
)

app.include_router(posts.router, dependencies=[Depends(get_api_key)])
app.include_router(articles.router, dependencies=[Depends(get_api_key)])
app.include_router(settings_router.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Zola Publisher API is running"}
