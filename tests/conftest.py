import textwrap

from app.errors import TransportError
from app.schemas.post import ArticleIndex, RemoteEntry


def make_entry(name: str, directory: str = "content/blog") -> RemoteEntry:
    path = f"{directory}/{name}"
    return RemoteEntry(
        name=name,
        path=path,
        url=f"https://api.github.com/repos/me/site/contents/{path}?ref=main",
        type="file",
    )


class FakeGateway:
    """
    Minimal in-memory GitHub gateway stand-in.
    `files` maps fetch urls to document text; a url mapped to an exception
    raises it when read.
    """

    def __init__(self, entries=None, files=None, list_error=None, write_error=None):
        self.entries = entries or []
        self.files = files or {}
        self.list_error = list_error
        self.write_error = write_error
        self.calls = []
        self.writes = []

    async def list_contents(self, path: str):
        self.calls.append(("list", path))
        if self.list_error:
            raise self.list_error
        return list(self.entries)

    async def read_file(self, reference: str) -> str:
        self.calls.append(("read", reference))
        value = self.files.get(reference)
        if isinstance(value, Exception):
            raise value
        if value is None:
            raise TransportError(f"missing {reference}")
        return textwrap.dedent(value).lstrip()

    async def read_file_at(self, path: str) -> str:
        return await self.read_file(path)

    async def write_file(self, path, filename, content, commit_message):
        self.calls.append(("write", path, filename))
        if self.write_error:
            raise self.write_error
        self.writes.append(
            {
                "path": path,
                "filename": filename,
                "content": content,
                "message": commit_message,
            }
        )


class FakeIndexBuilder:
    """
    Minimal index builder stand-in for router tests.
    """

    def __init__(self, index=None, error=None):
        self.index = index
        self.error = error
        self.paths = []

    async def build(self, path: str):
        self.paths.append(path)
        if self.error:
            raise self.error
        return self.index or ArticleIndex(path=path, articles=[])


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, publish_return=None, article_return=None, error=None):
        self._publish_return = publish_return
        self._article_return = article_return
        self.error = error
        self.published = []
        self.previewed = []

    def preview(self, post):
        self.previewed.append(post)
        return {"source": f"source:{post.title}", "html": f"<p>{post.body}</p>"}

    async def publish(self, post, path):
        self.published.append((post, path))
        if self.error:
            raise self.error
        return self._publish_return

    async def get_article(self, path, title=None):
        if self.error:
            raise self.error
        return self._article_return
