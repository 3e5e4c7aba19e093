"""Tests for turning raw repository data into prompt context."""

from __future__ import annotations

import json

import pytest

from readme_service.services import preprocessor
from readme_service.services.models import ConfigFile, LicenseInfo, RepoMetadata
from readme_service.services.preprocessor import (
    NO_CONFIG_FILES,
    detect_package_manager,
    detect_tools,
    extract_dependencies,
    parse_pyproject_dependencies,
    parse_requirements,
    preprocess,
)
from tests._fixtures.github import make_raw


def test_empty_repository_yields_defaults() -> None:
    ctx = preprocess(make_raw())

    assert ctx.repo_name == "widget"
    assert ctx.description == "No description provided"
    assert ctx.tech_stack.languages == []
    assert ctx.tech_stack.frameworks == []
    assert ctx.tech_stack.tools == []
    assert ctx.tech_stack.package_manager is None
    assert ctx.dependencies.production == []
    assert ctx.dependencies.development == []
    assert ctx.project_structure == ""
    assert ctx.scripts == {}
    assert ctx.license is None
    assert ctx.existing_readme_summary is None
    assert ctx.config_summary == NO_CONFIG_FILES


def test_next_project_scenario() -> None:
    meta = RepoMetadata(name="widget", full_name="acme/widget", default_branch="main", language="TypeScript")
    raw = make_raw(
        ["package.json", "src/index.ts", "README.md"],
        metadata=meta,
        package_json={"dependencies": {"next": "1.0.0"}},
    )

    ctx = preprocess(raw)

    assert "Next.js" in ctx.tech_stack.frameworks
    assert "TypeScript" in ctx.tech_stack.languages
    assert ctx.tech_stack.package_manager is None


def test_languages_put_primary_first_and_deduplicate() -> None:
    meta = RepoMetadata(name="w", full_name="a/w", default_branch="main", language="Python")
    raw = make_raw(["app.py", "web/app.tsx", "web/util.js", "lib.py", "README.md"], dirs=["web.py"], metadata=meta)

    ctx = preprocess(raw)

    # directories never count, even with a code-like suffix
    assert ctx.tech_stack.languages == ["Python", "TypeScript", "JavaScript"]


def test_frameworks_follow_table_order_across_dev_dependencies() -> None:
    package_json = {
        "dependencies": {"express": "^4", "react": "^18"},
        "devDependencies": {"jest": "^29", "tailwindcss": "^3"},
    }

    ctx = preprocess(make_raw(package_json=package_json))

    assert ctx.tech_stack.frameworks == ["React", "Express.js", "Tailwind CSS", "Jest"]


def test_tools_detected_from_marker_paths() -> None:
    raw = make_raw([
        "docker-compose.override.yml",
        ".github/workflows/ci.yml",
        ".circleci/config.yml",
        "Makefile",
        ".prettierrc",
        "netlify.toml",
    ])

    assert detect_tools(raw.file_tree) == ["Docker", "GitHub Actions", "CircleCI", "Make", "Prettier", "Netlify"]


@pytest.mark.parametrize(
    ("paths", "expected"),
    [
        (["package-lock.json", "yarn.lock", "pnpm-lock.yaml"], "pnpm"),
        (["package-lock.json", "yarn.lock"], "yarn"),
        (["package-lock.json", "requirements.txt"], "npm"),
        (["bun.lockb"], "bun"),
        (["pyproject.toml", "Cargo.toml"], "pip"),
        (["Cargo.toml", "go.mod"], "cargo"),
        (["go.mod"], "go"),
        (["Gemfile"], "bundler"),
        (["pom.xml", "build.gradle"], "maven"),
        (["build.gradle"], "gradle"),
        (["sub/yarn.lock"], None),
    ],
)
def test_package_manager_priority(paths, expected) -> None:
    assert detect_package_manager(make_raw(paths).file_tree) == expected


def test_dependency_caps_hold_for_large_inputs() -> None:
    package_json = {
        "dependencies": {f"dep{i}": "1" for i in range(50)},
        "devDependencies": {f"dev{i}": "1" for i in range(50)},
    }
    requirements = "\n".join(f"pkg{i}==1.0" for i in range(50))
    pyproject = "[project]\ndependencies = [\n" + "\n".join(f'  "py{i}>=1",' for i in range(50)) + "\n]\n"

    deps = extract_dependencies(package_json, requirements, pyproject)

    assert len(deps.production) == preprocessor.MAX_PRODUCTION_DEPS
    assert len(deps.development) == preprocessor.MAX_DEV_DEPS
    assert deps.production[0] == "dep0"
    assert deps.development[-1] == "dev9"


def test_parse_requirements_strips_comments_and_versions() -> None:
    text = "# web\nfastapi>=0.110\n\nhttpx==0.27.0\npydantic!=2.0\nuvicorn\n"

    assert parse_requirements(text) == ["fastapi", "httpx", "pydantic", "uvicorn"]


def test_parse_pyproject_dependencies() -> None:
    text = (
        "[project]\n"
        'name = "widget"\n'
        "dependencies = [\n"
        '    "fastapi>=0.110",\n'
        '    "httpx",\n'
        "]\n"
    )

    assert parse_pyproject_dependencies(text) == ["fastapi", "httpx"]


def test_parse_pyproject_single_line_list() -> None:
    assert parse_pyproject_dependencies('dependencies = ["click>=8,<9", "rich"]') == ["click", "rich"]


def test_parse_pyproject_without_list_is_empty() -> None:
    assert parse_pyproject_dependencies("[tool.poetry]\nname = 'x'\n") == []


def test_structure_summary_skips_hidden_and_vendored_dirs() -> None:
    dirs = ["src", ".github", "node_modules", "__pycache__", "docs", "src/lib"]
    raw = make_raw(["README.md", ".gitignore", "src/main.py"], dirs=dirs)

    ctx = preprocess(raw)

    assert ctx.project_structure == "Directories: src, docs\nFiles: README.md, .gitignore"


def test_structure_summary_caps_entries() -> None:
    raw = make_raw([f"file{i}.txt" for i in range(30)], dirs=[f"dir{i}" for i in range(30)])

    dirs_line, files_line = preprocess(raw).project_structure.split("\n")

    assert len(dirs_line.split(", ")) == preprocessor.MAX_TOP_LEVEL_DIRS
    assert len(files_line.split(", ")) == preprocessor.MAX_TOP_LEVEL_FILES


def test_readme_summary_lists_first_ten_headings() -> None:
    readme = "\n".join(f"{'#' * (1 + i % 3)} Heading {i}\ntext" for i in range(12))

    summary = preprocess(make_raw(existing_readme=readme)).existing_readme_summary

    assert summary.startswith("Existing README sections: # Heading 0, ## Heading 1")
    assert "Heading 9" in summary
    assert "Heading 10" not in summary


def test_readme_without_headings_has_no_summary() -> None:
    assert preprocess(make_raw(existing_readme="just text\n#hashtag")).existing_readme_summary is None


def test_config_summary_truncates_each_file() -> None:
    files = [ConfigFile(path="Dockerfile", content="x" * 500), ConfigFile(path="go.mod", content="module w")]

    summary = preprocess(make_raw(config_files=files)).config_summary

    assert summary == f"Dockerfile: {'x' * 200}...\n\ngo.mod: module w..."


def test_license_requires_license_text() -> None:
    meta = RepoMetadata(name="w", full_name="a/w", default_branch="main", license=LicenseInfo(name="MIT License", spdx_id="MIT"))

    assert preprocess(make_raw(metadata=meta)).license is None
    assert preprocess(make_raw(metadata=meta, license_content="...")).license == "MIT License"
    assert preprocess(make_raw(license_content="...")).license == "Custom License"


def test_scripts_come_from_package_json() -> None:
    package_json = json.loads('{"scripts": {"dev": "next dev", "build": "next build"}}')

    assert preprocess(make_raw(package_json=package_json)).scripts == {"dev": "next dev", "build": "next build"}


def test_malformed_manifest_sections_are_ignored() -> None:
    ctx = preprocess(make_raw(package_json={"dependencies": ["react"], "scripts": "nope"}))

    assert ctx.dependencies.production == []
    assert ctx.tech_stack.frameworks == []
    assert ctx.scripts == {}
