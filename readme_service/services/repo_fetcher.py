# /readme_service/services/repo_fetcher.py
# This module gathers everything the preprocessor needs from GitHub: metadata, the recursive tree,
# a handful of well-known files and a bounded set of configuration files.
from __future__ import annotations

import asyncio
import re
from typing import Any, Awaitable, List, Optional, Sequence

import httpx

from ..logging import get_logger
from ..settings import settings
from .github_client import GitHubClient
from .models import ConfigFile, FileTreeEntry, RawRepositoryData, RepositoryIdentity

logger = get_logger(__name__)

# We use async coding for all GitHub client interactions so the optional file fetches run concurrently.

README_CANDIDATES = ("README.md", "readme.md")
LICENSE_CANDIDATES = ("LICENSE", "LICENSE.md")

CONFIG_SUFFIX_RE = re.compile(r"\.(env\.example|dockerignore)$")
CONFIG_TOP_LEVEL_RE = re.compile(
    r"^(\.env\.example|docker-compose\.ya?ml|Dockerfile|Makefile|\.gitignore|tsconfig\.json"
    r"|vite\.config\.[jt]s|next\.config\.[jt]s|webpack\.config\.[jt]s)$"
)
CONFIG_EXACT_PATHS = frozenset({"setup.py", "setup.cfg", "Cargo.toml", "go.mod", "pom.xml", "build.gradle"})


def is_config_file(path: str) -> bool:
    return bool(
        CONFIG_SUFFIX_RE.search(path)
        or CONFIG_TOP_LEVEL_RE.match(path)
        or path in CONFIG_EXACT_PATHS
    )


def select_config_files(file_tree: Sequence[FileTreeEntry], limit: Optional[int] = None) -> List[str]:
    """Config file paths in tree order, at most `limit` of them."""
    limit = settings.max_config_files if limit is None else limit
    paths = [e.path for e in file_tree if e.kind == "file" and is_config_file(e.path)]
    return paths[:limit]


async def _optional(label: str, awaitable: Awaitable[Any]) -> Any:
    # one optional file failing must not sink the whole request
    try:
        return await awaitable
    except (httpx.HTTPError, ValueError) as e:
        logger.debug("Optional fetch of %s failed: %s", label, e)
        return None


async def _first_available(
    github: GitHubClient, identity: RepositoryIdentity, paths: Sequence[str], ref: str
) -> Optional[str]:
    # Every candidate is tried after any non-success, not only after a clean 404.
    for path in paths:
        content = await _optional(path, github.get_file_content(identity.owner, identity.name, path, ref))
        if content is not None:
            return content
    return None


async def _load_config_files(
    github: GitHubClient, identity: RepositoryIdentity, paths: Sequence[str], ref: str
) -> List[ConfigFile]:
    contents = await asyncio.gather(
        *(_optional(path, github.get_file_content(identity.owner, identity.name, path, ref)) for path in paths)
    )
    return [ConfigFile(path=path, content=content) for path, content in zip(paths, contents) if content]


async def fetch_repository(github: GitHubClient, identity: RepositoryIdentity) -> RawRepositoryData:
    owner, repo = identity.owner, identity.name

    # Metadata and tree are required; their errors propagate.
    metadata = await github.get_repo(owner, repo)
    ref = metadata.default_branch
    file_tree = await github.get_tree(owner, repo, ref)

    package_json, requirements_txt, pyproject_toml, existing_readme, license_content = await asyncio.gather(
        _optional("package.json", github.get_json_file(owner, repo, "package.json", ref)),
        _optional("requirements.txt", github.get_file_content(owner, repo, "requirements.txt", ref)),
        _optional("pyproject.toml", github.get_file_content(owner, repo, "pyproject.toml", ref)),
        _first_available(github, identity, README_CANDIDATES, ref),
        _first_available(github, identity, LICENSE_CANDIDATES, ref),
    )

    config_paths = select_config_files(file_tree)
    config_files = await _load_config_files(github, identity, config_paths, ref)

    logger.debug(
        "Fetched %s/%s: %d tree entries, %d config files", owner, repo, len(file_tree), len(config_files)
    )
    return RawRepositoryData(
        metadata=metadata,
        file_tree=file_tree,
        package_json=package_json,
        requirements_txt=requirements_txt,
        pyproject_toml=pyproject_toml,
        existing_readme=existing_readme,
        license_content=license_content,
        config_files=config_files,
    )
