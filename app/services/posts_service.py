import logging
import posixpath
from typing import Callable, Optional

from app.schemas.post import ArticleContent, Post, PreviewResult, PublishResult
from app.services.front_matter import encode, extract_title, strip_front_matter
from app.services.markdown_service import render_markdown

logger = logging.getLogger(__name__)

COMMIT_MESSAGE = "Add new blog post"


class PostsService:
    def __init__(self, gateway, renderer: Optional[Callable[[str], str]] = None):
        self.gateway = gateway
        self.renderer = renderer or render_markdown

    def preview(self, post: Post) -> PreviewResult:
        return PreviewResult(source=encode(post), html=self.renderer(post.body))

    async def publish(self, post: Post, path: str) -> PublishResult:
        if not post.title.strip():
            raise ValueError("Title is required")

        clean_path = normalize_path(path)
        filename = f"{post.title}.md"
        await self.gateway.write_file(clean_path, filename, encode(post), COMMIT_MESSAGE)

        remote_path = f"{clean_path}/{filename}" if clean_path else filename
        logger.info(f"Published {remote_path}")
        return PublishResult(path=remote_path, message=f"Successfully uploaded to {path}!")

    async def get_article(self, path: str, title: Optional[str] = None) -> ArticleContent:
        document = await self.gateway.read_file_at(path)
        content = strip_front_matter(document)
        return ArticleContent(
            title=title or _derive_title(document, path),
            path=path,
            content=content,
            html=self.renderer(content),
        )


def normalize_path(path: str) -> str:
    """Drop the leading slash GitHub refuses and any trailing one."""
    clean = path[1:] if path.startswith("/") else path
    return clean.rstrip("/")


def _derive_title(document: str, path: str) -> str:
    title = extract_title(document)
    if title:
        return title
    stem, _ = posixpath.splitext(posixpath.basename(path))
    return stem
