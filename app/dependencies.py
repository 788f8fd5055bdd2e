import httpx
from fastapi import Depends, Request

from app.services.article_index import ArticleIndexBuilder
from app.services.github_gateway import GitHubContentGateway
from app.services.posts_service import PostsService
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_gateway(
    current_settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    return GitHubContentGateway(current_settings.github_config(), client)


def get_index_builder(gateway=Depends(get_gateway)):
    return ArticleIndexBuilder(gateway)


def get_posts_service(gateway=Depends(get_gateway)):
    return PostsService(gateway=gateway)
