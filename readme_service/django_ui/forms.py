# /readme_service/django_ui/forms.py
# Turns the HTML form fields into the same arguments the JSON endpoint takes.
from typing import Any, Dict

from ..services.prompt_builder import SECTION_INSTRUCTIONS, TONE_INSTRUCTIONS

COMMON_LANGUAGES = [
    ("English", "English"),
    ("Spanish", "Español"),
    ("French", "Français"),
    ("German", "Deutsch"),
    ("Portuguese", "Português"),
    ("Italian", "Italiano"),
    ("Chinese", "中文"),
    ("Japanese", "日本語"),
    ("Korean", "한국어"),
    ("Russian", "Русский"),
    ("Arabic", "العربية"),
    ("Hindi", "हिन्दी"),
]

DEFAULT_SECTIONS = ("title_description", "installation", "usage", "features", "tech_stack", "license")

SECTION_LABELS = {name: text.split(":", 1)[0] for name, text in SECTION_INSTRUCTIONS.items()}
TONES = list(TONE_INSTRUCTIONS)


def payload_from_post(post) -> Dict[str, Any]:
    """`post` is a QueryDict-like object (needs get and getlist)."""
    checked = set(post.getlist("sections"))
    custom_language = (post.get("custom_language") or "").strip()
    return {
        "repo_url": (post.get("repo_url") or "").strip(),
        "sections": {name: name in checked for name in SECTION_INSTRUCTIONS},
        "tone": post.get("tone") or "",
        "language": custom_language or post.get("language") or "",
    }
