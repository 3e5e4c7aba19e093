# /readme_service/django_ui/views.py
from django.http import HttpResponse, HttpResponseNotAllowed
from django.shortcuts import render

from ..logging import get_logger
from ..utils.errors import AppError
from .forms import COMMON_LANGUAGES, DEFAULT_SECTIONS, SECTION_LABELS, TONES, payload_from_post

logger = get_logger(__name__)

# Populated by main.py at startup
_svc = None


def set_service(svc) -> None:
    global _svc
    _svc = svc


async def index(request):
    context = {
        "section_labels": SECTION_LABELS,
        "tones": TONES,
        "languages": COMMON_LANGUAGES,
        "checked": set(DEFAULT_SECTIONS),
        "tone": "professional",
        "language": "English",
    }

    if request.method == "POST":
        payload = payload_from_post(request.POST)
        context.update(
            repo_url=payload["repo_url"],
            checked={k for k, v in payload["sections"].items() if v},
            tone=payload["tone"],
            language=payload["language"],
        )
        if _svc is None:
            context["error"] = "README generator service is not available."
        else:
            try:
                context["result"] = await _svc.generate_readme(**payload)
            except AppError as e:
                context["error"] = e.message
            except Exception as e:
                logger.exception("UI generation failed")
                context["error"] = f"Unexpected error: {e}"

    return render(request, "django_ui/index.html", context)


def download(request):
    if request.method != "POST":
        return HttpResponseNotAllowed(["POST"])
    response = HttpResponse(request.POST.get("readme", ""), content_type="text/markdown; charset=utf-8")
    response["Content-Disposition"] = 'attachment; filename="README.md"'
    return response
