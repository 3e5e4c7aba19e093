# /readme_service/services/preprocessor.py
# This module turns raw GitHub data into the small, bounded context the prompt is built from.
# Every detection here is a lookup in one of the fixed tables below; nothing is inferred beyond them.
from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..utils.text import clip
from .models import (
    ConfigFile,
    Dependencies,
    FileTreeEntry,
    ProcessedContext,
    RawRepositoryData,
    TechStack,
)

MAX_PRODUCTION_DEPS = 20
MAX_DEV_DEPS = 10
MAX_TOP_LEVEL_DIRS = 15
MAX_TOP_LEVEL_FILES = 15
MAX_README_HEADERS = 10
CONFIG_PREVIEW_CHARS = 200

NO_CONFIG_FILES = "No configuration files found."

# Ordered: the first suffix that matches decides a file's language.
EXTENSION_LANGUAGES: Tuple[Tuple[str, str], ...] = (
    (".ts", "TypeScript"),
    (".tsx", "TypeScript"),
    (".js", "JavaScript"),
    (".jsx", "JavaScript"),
    (".py", "Python"),
    (".go", "Go"),
    (".rs", "Rust"),
    (".java", "Java"),
    (".kt", "Kotlin"),
    (".rb", "Ruby"),
    (".php", "PHP"),
    (".cs", "C#"),
    (".cpp", "C++"),
    (".c", "C"),
    (".swift", "Swift"),
    (".scala", "Scala"),
    (".vue", "Vue"),
    (".svelte", "Svelte"),
)

PACKAGE_FRAMEWORKS: Tuple[Tuple[str, str], ...] = (
    ("next", "Next.js"),
    ("react", "React"),
    ("vue", "Vue.js"),
    ("nuxt", "Nuxt.js"),
    ("@angular/core", "Angular"),
    ("svelte", "Svelte"),
    ("express", "Express.js"),
    ("fastify", "Fastify"),
    ("nestjs", "NestJS"),
    ("@nestjs/core", "NestJS"),
    ("koa", "Koa"),
    ("hapi", "Hapi"),
    ("gatsby", "Gatsby"),
    ("remix", "Remix"),
    ("astro", "Astro"),
    ("electron", "Electron"),
    ("vite", "Vite"),
    ("webpack", "Webpack"),
    ("tailwindcss", "Tailwind CSS"),
    ("prisma", "Prisma"),
    ("drizzle-orm", "Drizzle ORM"),
    ("sequelize", "Sequelize"),
    ("mongoose", "Mongoose"),
    ("jest", "Jest"),
    ("vitest", "Vitest"),
    ("mocha", "Mocha"),
    ("cypress", "Cypress"),
    ("playwright", "Playwright"),
)

PathPredicate = Callable[[str], bool]

TOOL_MARKERS: Tuple[Tuple[str, PathPredicate], ...] = (
    ("Docker", lambda p: p == "Dockerfile" or p.startswith("docker-compose")),
    ("GitHub Actions", lambda p: p.startswith(".github/workflows")),
    ("GitLab CI", lambda p: p == ".gitlab-ci.yml"),
    ("Travis CI", lambda p: p == ".travis.yml"),
    ("CircleCI", lambda p: p.startswith(".circleci/")),
    ("Make", lambda p: p == "Makefile"),
    ("ESLint", lambda p: p in {".eslintrc.js", ".eslintrc.json", "eslint.config.js", "eslint.config.mjs"}),
    ("Prettier", lambda p: p in {".prettierrc", "prettier.config.js"}),
    ("Vercel", lambda p: p == "vercel.json"),
    ("Netlify", lambda p: p == "netlify.toml"),
)

# Priority order; only the first package manager found is reported.
PACKAGE_MANAGER_INDICATORS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("pnpm-lock.yaml",), "pnpm"),
    (("yarn.lock",), "yarn"),
    (("package-lock.json",), "npm"),
    (("bun.lockb",), "bun"),
    (("requirements.txt", "pyproject.toml"), "pip"),
    (("Cargo.toml",), "cargo"),
    (("go.mod",), "go"),
    (("Gemfile",), "bundler"),
    (("pom.xml",), "maven"),
    (("build.gradle",), "gradle"),
)

IGNORED_TOP_LEVEL_DIRS = frozenset({"node_modules", "__pycache__"})

VERSION_SPEC_RE = re.compile(r"[=<>!]")
PYPROJECT_DEPS_RE = re.compile(r"dependencies\s*=\s*\[(.*?)\]", re.DOTALL)
MARKDOWN_HEADING_RE = re.compile(r"^#+\s+.+$", re.MULTILINE)


def _dict_section(manifest: Optional[Mapping[str, Any]], key: str) -> Dict[str, Any]:
    if not manifest:
        return {}
    section = manifest.get(key)
    return dict(section) if isinstance(section, Mapping) else {}


def _strip_version(spec: str) -> str:
    return VERSION_SPEC_RE.split(spec, maxsplit=1)[0].strip()


def detect_languages(file_tree: Sequence[FileTreeEntry]) -> List[str]:
    found: Dict[str, None] = {}
    for entry in file_tree:
        if entry.kind != "file":
            continue
        for ext, language in EXTENSION_LANGUAGES:
            if entry.path.endswith(ext):
                found[language] = None
                break
    return list(found)


def detect_frameworks(package_json: Optional[Mapping[str, Any]]) -> List[str]:
    if not package_json:
        return []
    deps = {**_dict_section(package_json, "dependencies"), **_dict_section(package_json, "devDependencies")}
    return [label for package, label in PACKAGE_FRAMEWORKS if package in deps]


def detect_tools(file_tree: Sequence[FileTreeEntry]) -> List[str]:
    paths = [e.path for e in file_tree]
    return [label for label, matches in TOOL_MARKERS if any(matches(p) for p in paths)]


def detect_package_manager(file_tree: Sequence[FileTreeEntry]) -> Optional[str]:
    paths = {e.path for e in file_tree}
    for indicators, manager in PACKAGE_MANAGER_INDICATORS:
        if any(name in paths for name in indicators):
            return manager
    return None


def parse_requirements(text: str) -> List[str]:
    names = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        name = _strip_version(line)
        if name:
            names.append(name)
    return names[:MAX_PRODUCTION_DEPS]


def parse_pyproject_dependencies(text: str) -> List[str]:
    # Best effort only: a regex over the first `dependencies = [...]`, not a TOML parser.
    m = PYPROJECT_DEPS_RE.search(text)
    if not m:
        return []
    names = []
    for item in re.split(r"[\n,]", m.group(1)):
        item = item.strip().replace('"', "").replace("'", "")
        if not item or item.startswith("#"):
            continue
        name = _strip_version(item)
        if name:
            names.append(name)
    return names[:MAX_PRODUCTION_DEPS]


def extract_dependencies(
    package_json: Optional[Mapping[str, Any]],
    requirements_txt: Optional[str],
    pyproject_toml: Optional[str],
) -> Dependencies:
    production: List[str] = []
    development: List[str] = []

    if package_json:
        production.extend(list(_dict_section(package_json, "dependencies"))[:MAX_PRODUCTION_DEPS])
        development.extend(list(_dict_section(package_json, "devDependencies"))[:MAX_DEV_DEPS])
    if requirements_txt:
        production.extend(parse_requirements(requirements_txt))
    if pyproject_toml:
        production.extend(parse_pyproject_dependencies(pyproject_toml))

    return Dependencies(production=production[:MAX_PRODUCTION_DEPS], development=development[:MAX_DEV_DEPS])


def summarize_structure(file_tree: Sequence[FileTreeEntry]) -> str:
    top_dirs = [
        e.path
        for e in file_tree
        if e.kind == "dir" and "/" not in e.path
        and not e.path.startswith(".") and e.path not in IGNORED_TOP_LEVEL_DIRS
    ][:MAX_TOP_LEVEL_DIRS]
    top_files = [e.path for e in file_tree if e.kind == "file" and "/" not in e.path][:MAX_TOP_LEVEL_FILES]

    parts = []
    if top_dirs:
        parts.append(f"Directories: {', '.join(top_dirs)}")
    if top_files:
        parts.append(f"Files: {', '.join(top_files)}")
    return "\n".join(parts)


def summarize_readme(readme: Optional[str]) -> Optional[str]:
    if not readme:
        return None
    headers = MARKDOWN_HEADING_RE.findall(readme)
    if not headers:
        return None
    return f"Existing README sections: {', '.join(h.strip() for h in headers[:MAX_README_HEADERS])}"


def summarize_config_files(config_files: Sequence[ConfigFile]) -> str:
    if not config_files:
        return NO_CONFIG_FILES
    return "\n\n".join(f"{f.path}: {clip(f.content, CONFIG_PREVIEW_CHARS)}..." for f in config_files)


def extract_scripts(package_json: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    return {str(k): str(v) for k, v in _dict_section(package_json, "scripts").items()}


def preprocess(raw: RawRepositoryData) -> ProcessedContext:
    meta = raw.metadata

    # primary language first, then whatever the tree shows
    languages = list(dict.fromkeys(
        lang for lang in [meta.language, *detect_languages(raw.file_tree)] if lang
    ))
    license_name = None
    if raw.license_content:
        license_name = (meta.license.name if meta.license and meta.license.name else None) or "Custom License"

    return ProcessedContext(
        repo_name=meta.name,
        full_name=meta.full_name,
        description=meta.description or "No description provided",
        primary_language=meta.language,
        topics=list(meta.topics),
        license=license_name,
        homepage=meta.homepage,
        stars=meta.stargazers_count,
        forks=meta.forks_count,
        tech_stack=TechStack(
            languages=languages,
            frameworks=detect_frameworks(raw.package_json),
            tools=detect_tools(raw.file_tree),
            package_manager=detect_package_manager(raw.file_tree),
        ),
        dependencies=extract_dependencies(raw.package_json, raw.requirements_txt, raw.pyproject_toml),
        project_structure=summarize_structure(raw.file_tree),
        scripts=extract_scripts(raw.package_json),
        existing_readme_summary=summarize_readme(raw.existing_readme),
        config_summary=summarize_config_files(raw.config_files),
    )
