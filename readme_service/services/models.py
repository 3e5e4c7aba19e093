# /readme_service/services/models.py
# Plain data carried between the fetch, preprocess and prompt stages. Everything here lives for a single request.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional


@dataclass(frozen=True)
class RepositoryIdentity:
    owner: str
    name: str


@dataclass(frozen=True)
class LicenseInfo:
    name: str
    spdx_id: Optional[str] = None


@dataclass
class RepoMetadata:
    name: str
    full_name: str
    default_branch: str
    description: Optional[str] = None
    topics: List[str] = field(default_factory=list)
    license: Optional[LicenseInfo] = None
    language: Optional[str] = None
    homepage: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RepoMetadata":
        lic = data.get("license") or None
        return cls(
            name=data.get("name") or "",
            full_name=data.get("full_name") or "",
            default_branch=data.get("default_branch") or "main",
            description=data.get("description"),
            topics=list(data.get("topics") or []),
            license=LicenseInfo(name=lic.get("name") or "", spdx_id=lic.get("spdx_id")) if lic else None,
            language=data.get("language"),
            homepage=data.get("homepage") or None,
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
        )


@dataclass(frozen=True)
class FileTreeEntry:
    path: str
    kind: Literal["file", "dir"]
    size: Optional[int] = None


@dataclass(frozen=True)
class ConfigFile:
    path: str
    content: str


@dataclass
class RawRepositoryData:
    metadata: RepoMetadata
    file_tree: List[FileTreeEntry] = field(default_factory=list)
    package_json: Optional[Dict[str, Any]] = None
    requirements_txt: Optional[str] = None
    pyproject_toml: Optional[str] = None
    existing_readme: Optional[str] = None
    license_content: Optional[str] = None
    config_files: List[ConfigFile] = field(default_factory=list)


@dataclass
class TechStack:
    languages: List[str] = field(default_factory=list)
    frameworks: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)
    package_manager: Optional[str] = None


@dataclass
class Dependencies:
    production: List[str] = field(default_factory=list)
    development: List[str] = field(default_factory=list)


@dataclass
class ProcessedContext:
    repo_name: str
    full_name: str
    description: str
    primary_language: Optional[str]
    topics: List[str]
    license: Optional[str]
    homepage: Optional[str]
    stars: int
    forks: int
    tech_stack: TechStack
    dependencies: Dependencies
    project_structure: str
    scripts: Dict[str, str]
    existing_readme_summary: Optional[str]
    config_summary: str
