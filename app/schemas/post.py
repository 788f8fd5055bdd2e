import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_TAGS = 3


class Post(BaseModel):
    title: str = ""
    date: datetime.date = Field(default_factory=datetime.date.today)
    author: str = ""
    body: str = ""
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _limit_tags(cls, value: List[str]) -> List[str]:
        if len(value) > MAX_TAGS:
            raise ValueError(f"At most {MAX_TAGS} tags are allowed")
        return value


class RemoteEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    path: str
    url: str
    type: str
    sha: Optional[str] = None
    size: Optional[int] = None
    download_url: Optional[str] = None
    html_url: Optional[str] = None


class ArticleSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    path: str


class ArticleIndex(BaseModel):
    path: str
    articles: List[ArticleSummary] = Field(default_factory=list)


class ArticleContent(BaseModel):
    title: str
    path: str
    content: str  # Markdown content without front matter
    html: str


class PublishRequest(BaseModel):
    post: Post
    path: str = "/content/blog"


class PublishResult(BaseModel):
    path: str
    message: str


class PreviewResult(BaseModel):
    source: str
    html: str


class PublishPaths(BaseModel):
    paths: List[str]
    default: str


class SettingsStatus(BaseModel):
    configured: bool
    owner: str
    repo: str
    branch: str
