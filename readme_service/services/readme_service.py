# /readme_service/services/readme_service.py
# This module defines the ReadmeService class, which validates a generation request and runs
# fetch -> preprocess -> prompt -> generate, strictly in that order.
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..logging import get_logger
from ..utils.errors import validation_error
from .github_client import GitHubClient, parse_repo_url
from .llm_client import GeminiLLMClient
from .preprocessor import preprocess
from .prompt_builder import TONE_INSTRUCTIONS, SectionSelection, build_prompt
from .repo_fetcher import fetch_repository

logger = get_logger(__name__)


def validate_request(
    repo_url: Optional[str],
    sections: Any,
    tone: Optional[str],
    language: Optional[str],
) -> Tuple[str, SectionSelection, str, str]:
    """Check the request fields in a fixed order; the first problem wins."""
    if not repo_url:
        raise validation_error("Repository URL is required")
    if not isinstance(sections, Mapping):
        raise validation_error("Section selection is required")
    if not tone:
        raise validation_error("Tone selection is required")
    if not language:
        raise validation_error("Language selection is required")

    if tone not in TONE_INSTRUCTIONS:
        raise validation_error(f"Invalid tone: {tone}")
    try:
        selection = SectionSelection.model_validate(dict(sections))
    except ValidationError as e:
        raise validation_error("Invalid section selection") from e
    if not selection.selected():
        raise validation_error("Select at least one README section")
    return repo_url, selection, tone, language


class ReadmeService:
    def __init__(self, github: GitHubClient, llm: GeminiLLMClient) -> None:
        self.github = github
        self.llm = llm

    async def generate_readme(
        self,
        repo_url: Optional[str],
        sections: Any,
        tone: Optional[str],
        language: Optional[str],
    ) -> Dict[str, Any]:
        repo_url, selection, tone, language = validate_request(repo_url, sections, tone, language)
        identity = parse_repo_url(repo_url)

        logger.info("Fetching repository data for %s/%s", identity.owner, identity.name)
        raw = await fetch_repository(self.github, identity)

        logger.info("Preprocessing repository data for %s", raw.metadata.full_name)
        ctx = preprocess(raw)

        logger.info("Generating README for %s (tone=%s, language=%s)", ctx.full_name, tone, language)
        prompt = build_prompt(ctx, selection, tone, language)
        readme = await self.llm.generate(prompt)

        stack = ctx.tech_stack
        return {
            "success": True,
            "readme": readme,
            "metadata": {
                "repoName": ctx.repo_name,
                "fullName": ctx.full_name,
                "detectedTechStack": {
                    "languages": stack.languages,
                    "frameworks": stack.frameworks,
                    "tools": stack.tools,
                    "packageManager": stack.package_manager,
                },
            },
        }
