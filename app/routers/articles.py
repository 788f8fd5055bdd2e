import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.errors import GatewayError
from app.routers.common import gateway_http_error
from app.schemas.post import ArticleContent, ArticleIndex
from app.services.article_index import ArticleIndexBuilder
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/articles", response_model=ArticleIndex)
async def list_articles(
    path: str = Query(..., description="Repository directory to browse"),
    builder: ArticleIndexBuilder = Depends(deps.get_index_builder),
):
    """Index the articles published under a repository path."""
    try:
        return await builder.build(path)
    except GatewayError as e:
        logger.warning(f"Failed to fetch contents of {path}: {e}")
        raise gateway_http_error(e)
    except Exception as e:
        logger.error(f"Unexpected error listing articles in {path}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve articles")


@router.get("/articles/content", response_model=ArticleContent)
async def get_article(
    path: str = Query(..., description="Repository path of the article"),
    title: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Read one article with its front matter removed."""
    try:
        return await service.get_article(path, title=title)
    except GatewayError as e:
        logger.warning(f"Failed to read article {path}: {e}")
        raise gateway_http_error(e)
    except Exception as e:
        logger.error(f"Unexpected error reading article {path}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve article")
