# /readme_service/services/github_client.py
# This module defines a GitHubClient class that provides methods for interacting with the GitHub API
import json
import re
from typing import Any, Dict, List, Optional

import httpx

from ..logging import get_logger
from ..settings import settings
from ..utils.errors import invalid_reference, not_found, rate_limited, upstream_error
from ..utils.text import decode_content
from .models import FileTreeEntry, RepoMetadata, RepositoryIdentity

logger = get_logger(__name__)

# Tried in order; the first match wins. Anchored, so "owner/repo/extra" never matches.
GITHUB_REPO_PATTERNS = (
    re.compile(r"^https?://(?:www\.)?github\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"),
    re.compile(r"^github\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"),
    re.compile(r"^(?P<owner>[^/:]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"),
)


def parse_repo_url(url: str) -> RepositoryIdentity:
    text = (url or "").strip()
    for pattern in GITHUB_REPO_PATTERNS:
        m = pattern.match(text)
        if m:
            return RepositoryIdentity(owner=m.group("owner"), name=m.group("repo"))
    raise invalid_reference()


class GitHubClient:
    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        token = token if token is not None else settings.github_token
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "readme-generator/0.1",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.AsyncClient(
            base_url=base_url or settings.github_api_base,
            headers=headers,
            timeout=httpx.Timeout(settings.http_timeout_s),
            # renamed or transferred repos answer with a 301
            follow_redirects=True,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    parse_repo_url = staticmethod(parse_repo_url)

    async def get_repo(self, owner: str, repo: str) -> RepoMetadata:
        r = await self._client.get(f"/repos/{owner}/{repo}")
        if r.status_code == 404:
            raise not_found("Repository not found. Make sure it exists and is public.")
        if r.status_code in (403, 429):
            raise rate_limited("GitHub API rate limit exceeded. Please try again later.")
        if r.status_code >= 300:
            raise upstream_error(f"GitHub API error: {r.status_code}")
        return RepoMetadata.from_api(r.json())

    async def get_tree(self, owner: str, repo: str, branch: str) -> List[FileTreeEntry]:
        # recursive tree
        r = await self._client.get(f"/repos/{owner}/{repo}/git/trees/{branch}", params={"recursive": "1"})
        if r.status_code >= 300:
            raise upstream_error(f"Failed to fetch file tree: {r.status_code}")
        data = r.json()
        if data.get("truncated"):
            logger.info("GitHub truncated the tree for %s/%s; working with a partial listing", owner, repo)

        entries: List[FileTreeEntry] = []
        for item in data.get("tree") or []:
            path = item.get("path")
            if not path:
                continue
            size = item.get("size") if isinstance(item.get("size"), int) else None
            entries.append(FileTreeEntry(path=path, kind="dir" if item.get("type") == "tree" else "file", size=size))
        return entries

    async def get_file(self, owner: str, repo: str, path: str, ref: Optional[str] = None) -> Optional[Dict[str, Any]]:
        params = {"ref": ref} if ref else None
        r = await self._client.get(f"/repos/{owner}/{repo}/contents/{path}", params=params)
        if r.status_code >= 300:
            return None
        data = r.json()
        # directories come back as a list
        return data if isinstance(data, dict) else None

    async def get_file_content(self, owner: str, repo: str, path: str, ref: Optional[str] = None) -> Optional[str]:
        obj = await self.get_file(owner, repo, path, ref)
        if not obj:
            return None
        return decode_content(obj)

    async def get_json_file(self, owner: str, repo: str, path: str, ref: Optional[str] = None) -> Optional[Dict[str, Any]]:
        text = await self.get_file_content(owner, repo, path, ref)
        if text is None:
            return None
        try:
            data = json.loads(text)
        except ValueError:
            logger.debug("Could not parse %s as JSON", path)
            return None
        return data if isinstance(data, dict) else None
