from __future__ import annotations

import pytest

pytest.importorskip("django")

from django.utils.datastructures import MultiValueDict  # noqa: E402

from readme_service.django_ui.forms import SECTION_LABELS, payload_from_post  # noqa: E402


def test_payload_from_post_maps_checkboxes() -> None:
    post = MultiValueDict({
        "repo_url": [" acme/widget "],
        "sections": ["usage", "license"],
        "tone": ["friendly"],
        "language": ["German"],
        "custom_language": [""],
    })

    payload = payload_from_post(post)

    assert payload["repo_url"] == "acme/widget"
    assert payload["tone"] == "friendly"
    assert payload["language"] == "German"
    assert [k for k, v in payload["sections"].items() if v] == ["usage", "license"]
    assert len(payload["sections"]) == 10


def test_custom_language_wins() -> None:
    post = MultiValueDict({"language": ["English"], "custom_language": ["Klingon"]})

    assert payload_from_post(post)["language"] == "Klingon"


def test_section_labels_are_short_names() -> None:
    assert SECTION_LABELS["title_description"] == "Title & Description"
    assert SECTION_LABELS["api_documentation"] == "API Documentation"
