# /readme_service/services/prompt_builder.py
# This module renders the processed repository context and the caller's choices into the single
# prompt sent to the LLM. Output is a pure function of its inputs.
from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict

from .models import ProcessedContext

Tone = Literal["professional", "friendly", "technical", "marketing"]

PROMPT_PRODUCTION_DEPS = 15
PROMPT_DEV_DEPS = 10
PROMPT_SCRIPTS = 10


class SectionSelection(BaseModel):
    # "yes", 1 and "true" are rejected rather than coerced
    model_config = ConfigDict(strict=True)

    title_description: bool = False
    installation: bool = False
    usage: bool = False
    features: bool = False
    tech_stack: bool = False
    configuration: bool = False
    api_documentation: bool = False
    contributing: bool = False
    license: bool = False
    badges: bool = False

    def selected(self) -> List[str]:
        return [name for name in SECTION_INSTRUCTIONS if getattr(self, name)]


SECTION_INSTRUCTIONS: Dict[str, str] = {
    "title_description": "Title & Description: Project name as heading, concise description of what the project does.",
    "installation": "Installation: Step-by-step installation instructions based on detected package manager and dependencies.",
    "usage": "Usage: Basic usage examples and getting started guide.",
    "features": "Features: List key features based on actual functionality detected in the codebase.",
    "tech_stack": "Tech Stack: List technologies, frameworks, and tools used (only those detected).",
    "configuration": "Configuration: Environment variables, config files, and setup options.",
    "api_documentation": "API Documentation: Document any public APIs or endpoints if detected.",
    "contributing": "Contributing: Guidelines for contributing to the project.",
    "license": "License: License information based on the LICENSE file.",
    "badges": "Badges: Relevant shields.io badges (language, package manager, license, etc.).",
}

TONE_INSTRUCTIONS: Dict[str, str] = {
    "professional": "Use a professional, business-appropriate tone. Be clear, concise, and objective.",
    "friendly": "Use a friendly, welcoming tone. Be approachable and encourage community involvement.",
    "technical": "Use a technical, detailed tone. Be precise and include technical details where relevant.",
    "marketing": "Use a marketing-oriented tone. Highlight benefits, features, and value proposition.",
}

CRITICAL_RULES = (
    "- ONLY use information provided above - do NOT infer or guess\n"
    "- Do NOT invent features, APIs, or technologies not explicitly listed\n"
    '- Do NOT add placeholder content like "[describe...]" or "[add...]"\n'
    "- If information is missing for a section, provide minimal accurate content or skip details\n"
    "- Use actual package manager commands based on detected package manager (npm, yarn, pnpm, pip, etc.)\n"
    "- For installation, only include commands that make sense for this repo\n"
    "- For badges, use shields.io format and only include relevant ones (language, license, version if package.json version exists)\n"
    "- Output must be valid Markdown\n"
    "- Follow standard open-source README conventions"
)


def _joined(items: List[str], fallback: str) -> str:
    return ", ".join(items) or fallback


def _context_block(ctx: ProcessedContext) -> str:
    stack = ctx.tech_stack
    scripts = "\n".join(f"- {k}: {v}" for k, v in list(ctx.scripts.items())[:PROMPT_SCRIPTS]) or "None"
    readme = f"EXISTING README:\n{ctx.existing_readme_summary}" if ctx.existing_readme_summary else ""

    return (
        "REPOSITORY INFORMATION:\n"
        f"- Name: {ctx.repo_name}\n"
        f"- Full Name: {ctx.full_name}\n"
        f"- Description: {ctx.description}\n"
        f"- Primary Language: {ctx.primary_language or 'Unknown'}\n"
        f"- Topics: {_joined(ctx.topics, 'None')}\n"
        f"- License: {ctx.license or 'Not specified'}\n"
        f"- Homepage: {ctx.homepage or 'None'}\n"
        f"- Stats: {ctx.stars} stars, {ctx.forks} forks\n"
        "\n"
        "TECH STACK (DETECTED):\n"
        f"- Languages: {_joined(stack.languages, 'None detected')}\n"
        f"- Frameworks: {_joined(stack.frameworks, 'None detected')}\n"
        f"- Tools: {_joined(stack.tools, 'None detected')}\n"
        f"- Package Manager: {stack.package_manager or 'Unknown'}\n"
        "\n"
        "DEPENDENCIES:\n"
        f"- Production: {_joined(ctx.dependencies.production[:PROMPT_PRODUCTION_DEPS], 'None')}\n"
        f"- Development: {_joined(ctx.dependencies.development[:PROMPT_DEV_DEPS], 'None')}\n"
        "\n"
        "PROJECT STRUCTURE:\n"
        f"{ctx.project_structure}\n"
        "\n"
        "SCRIPTS (from package.json or similar):\n"
        f"{scripts}\n"
        "\n"
        f"{readme}\n"
        "\n"
        "CONFIGURATION FILES SUMMARY:\n"
        f"{ctx.config_summary}\n"
    )


def build_prompt(ctx: ProcessedContext, sections: SectionSelection, tone: Tone, language: str) -> str:
    selected = "\n- ".join(SECTION_INSTRUCTIONS[name] for name in sections.selected())
    tone_instruction = TONE_INSTRUCTIONS[tone]

    return (
        "You are a technical writer creating a README.md file for an open-source project.\n"
        "\n"
        f"{_context_block(ctx)}\n"
        "INSTRUCTIONS:\n"
        "1. Generate a complete, replacement README.md file\n"
        f"2. Write in {language} language\n"
        f"3. {tone_instruction}\n"
        "4. Include ONLY these sections:\n"
        f"- {selected}\n"
        "\n"
        "CRITICAL RULES:\n"
        f"{CRITICAL_RULES}\n"
        "\n"
        "Generate the README.md now:"
    )
