import asyncio
import logging
from typing import Optional

from app.schemas.post import ArticleIndex, ArticleSummary, RemoteEntry
from app.services.front_matter import extract_title

logger = logging.getLogger(__name__)


class ArticleIndexBuilder:
    def __init__(self, gateway):
        self.gateway = gateway

    async def build(self, path: str) -> ArticleIndex:
        """
        List `path`, fetch every markdown file concurrently and index the
        ones whose front matter carries a title.
        A failing listing fails the build; a failing file is only logged.
        """
        entries = await self.gateway.list_contents(path)
        logger.info(f"Fetched {len(entries)} markdown files from {path}")

        titles = await asyncio.gather(*(self._fetch_title(entry) for entry in entries))

        articles = [
            ArticleSummary(title=title, path=entry.path)
            for entry, title in zip(entries, titles)
            if title is not None
        ]
        articles.sort(key=lambda article: article.title)
        logger.info(f"Indexed {len(articles)} articles under {path}")
        return ArticleIndex(path=path, articles=articles)

    async def _fetch_title(self, entry: RemoteEntry) -> Optional[str]:
        try:
            content = await self.gateway.read_file(entry.url)
        except Exception as e:
            logger.warning(f"Error fetching file content for {entry.path}: {e}")
            return None

        title = extract_title(content)
        if title is None:
            logger.debug(f"No title found in front matter of {entry.path}")
        return title
