from __future__ import annotations

import pytest

from tests._fixtures.github import FakeGitHub


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def widget_github(fake_github: FakeGitHub) -> FakeGitHub:
    """A small Next.js repository: metadata, tree, package.json and README."""
    fake_github.add_repo()
    fake_github.add_tree(["package.json", "src/index.ts", "README.md"], dirs=["src"])
    fake_github.add_file("package.json", '{"dependencies": {"next": "1.0.0"}}')
    fake_github.add_file("README.md", "# Widget\n\n## Usage\n")
    return fake_github
