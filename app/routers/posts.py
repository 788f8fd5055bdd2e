import logging

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.errors import GatewayError
from app.routers.common import gateway_http_error
from app.schemas.post import Post, PreviewResult, PublishPaths, PublishRequest, PublishResult
from app.services.posts_service import PostsService
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/paths", response_model=PublishPaths)
def list_publish_paths(current_settings: Settings = Depends(deps.get_settings)):
    """Predefined publish targets offered by the upload form."""
    return PublishPaths(
        paths=current_settings.PUBLISH_PATHS,
        default=current_settings.DEFAULT_PUBLISH_PATH,
    )


@router.post("/posts/preview", response_model=PreviewResult)
def preview_post(
    post: Post,
    current_settings: Settings = Depends(deps.get_settings),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Show the generated source text and the rendered body."""
    if not post.author:
        post = post.model_copy(update={"author": current_settings.DEFAULT_AUTHOR})
    return service.preview(post)


@router.post("/posts", response_model=PublishResult, status_code=201)
async def publish_post(
    request: PublishRequest,
    current_settings: Settings = Depends(deps.get_settings),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Upload a post to the configured repository."""
    post = request.post
    if not post.author:
        post = post.model_copy(update={"author": current_settings.DEFAULT_AUTHOR})

    try:
        return await service.publish(post, request.path)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GatewayError as e:
        logger.warning(f"Upload to {request.path} failed: {e}")
        raise gateway_http_error(e, prefix="Upload failed: ")
    except Exception as e:
        logger.error(f"Unexpected error publishing post: {e}")
        raise HTTPException(status_code=500, detail="Upload failed")
