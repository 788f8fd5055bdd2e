import base64
import binascii
import logging
import urllib.parse
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from app.errors import DecodeError, NotConfigured, RemoteRejected, TransportError
from app.schemas.post import RemoteEntry
from app.settings import GitHubConfig

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class GitHubContentGateway:
    """
    Read and write files through the GitHub Contents API.
    Every failure is reported as one of the errors in app.errors.
    """

    def __init__(self, config: GitHubConfig, client: httpx.AsyncClient):
        self.config = config
        self.client = client

    def contents_url(self, path: str) -> str:
        segments = [s for s in path.strip("/").split("/") if s]
        quoted = "/".join(urllib.parse.quote(s, safe="") for s in segments)
        return f"{self.config.api_url}/repos/{self.config.owner}/{self.config.repo}/contents/{quoted}"

    async def list_contents(self, path: str) -> List[RemoteEntry]:
        """List the markdown files directly under `path`."""
        payload = await self._get_json(self.contents_url(path), params={"ref": self.config.branch})
        if not isinstance(payload, list):
            raise DecodeError(f"Expected a directory listing for {path!r}")

        try:
            entries = [RemoteEntry.model_validate(item) for item in payload]
        except ValidationError as e:
            raise DecodeError(f"Unexpected listing entry under {path!r}: {e}") from e

        return [entry for entry in entries if entry.name.endswith(MARKDOWN_SUFFIX)]

    async def read_file(self, reference: str, params: Optional[dict] = None) -> str:
        """Fetch a file by its API url and return the decoded text."""
        payload = await self._get_json(reference, params=params)
        encoded = payload.get("content") if isinstance(payload, dict) else None
        if not isinstance(encoded, str):
            raise DecodeError(f"No file content returned for {reference}")
        return decode_content(encoded)

    async def read_file_at(self, path: str) -> str:
        return await self.read_file(self.contents_url(path), params={"ref": self.config.branch})

    async def write_file(
        self, path: str, filename: str, content: str, commit_message: str
    ) -> None:
        """Create or replace `path/filename` on the configured branch."""
        target = f"{path.strip('/')}/{filename}" if path.strip("/") else filename
        url = self.contents_url(target)

        body = {
            "message": commit_message,
            "content": encode_content(content),
            "branch": self.config.branch,
        }
        sha = await self._existing_sha(url)
        if sha:
            body["sha"] = sha

        await self._request("PUT", url, json=body)
        logger.info(f"Wrote {target} to {self.config.owner}/{self.config.repo}@{self.config.branch}")

    async def _existing_sha(self, url: str) -> Optional[str]:
        self._ensure_configured()
        try:
            response = await self.client.get(
                url, params={"ref": self.config.branch}, headers=self._headers()
            )
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach GitHub: {e}") from e

        if response.status_code != 200:
            return None
        try:
            payload = response.json()
        except ValueError:
            return None
        return payload.get("sha") if isinstance(payload, dict) else None

    async def _get_json(self, url: str, params: Optional[dict] = None) -> Any:
        response = await self._request("GET", url, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"GitHub returned invalid JSON for {url}") from e

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        self._ensure_configured()
        try:
            response = await self.client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"Could not reach GitHub: {e}") from e

        if not response.is_success:
            raise RemoteRejected(_error_message(response), status_code=response.status_code)
        return response

    def _ensure_configured(self) -> None:
        if not self.config.is_configured:
            raise NotConfigured()

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.config.token}",
            "Accept": "application/vnd.github+json",
        }


def encode_content(content: str) -> str:
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def decode_content(encoded: str) -> str:
    """GitHub wraps base64 payloads at 60 columns; the newlines must go first."""
    try:
        raw = base64.b64decode(encoded.replace("\n", ""), validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise DecodeError(f"Could not decode file content: {e}") from e


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return f"GitHub rejected the request (HTTP {response.status_code})"
