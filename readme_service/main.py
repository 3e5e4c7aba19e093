# /readme_service/main.py
# This is the main entry point for the README Generator application. It sets up the FastAPI app, including configuration, routes, services, and error handling.
from __future__ import annotations

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .settings import settings
from .logging import configure_logging, get_logger
from .utils.errors import AppError, status_for_message
from .api.routes import router
from .services.github_client import GitHubClient
from .services.llm_client import GeminiLLMClient
from .services.readme_service import ReadmeService

configure_logging(settings.log_level)
logger = get_logger(__name__)


# Optional Django UI mount -- INTERACTIVE form at /ui for local use and demos. Disabled unless ENABLE_DJANGO_UI is set.
def mount_django(app: FastAPI) -> None:
    if not settings.enable_django_ui:
        logger.info("Django UI disabled (ENABLE_DJANGO_UI is False)")
        return
    try:
        from .django_ui.asgi import get_django_asgi_app
        django_app = get_django_asgi_app()
        app.mount("/ui", django_app) ## GO to localhost:8000/ui to access the Django UI
        logger.info("Django UI mounted at /ui")
    except Exception:
        logger.exception("Django UI failed to mount")


@asynccontextmanager # For FastAPI lifespan event, to initialize and cleanup the shared HTTP client.
async def lifespan(app: FastAPI):
    github = GitHubClient()
    llm = GeminiLLMClient()
    svc = ReadmeService(github=github, llm=llm)

    app.state.svc = svc
    if not llm.enabled:
        logger.warning("GEMINI_API_KEY is not set; README generation requests will fail with 503")

    # inject service into Django UI
    if settings.enable_django_ui:
        try:
            from .django_ui import views as django_views
            django_views.set_service(svc)
        except ImportError:
            logger.exception("Django UI views could not be loaded")

    yield

    await github.aclose()


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
app.include_router(router)
mount_django(app)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.warning("%s %s failed (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError):
    # Force the required error shape
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Error generating README")
    message = str(exc) or "An unexpected error occurred"
    return JSONResponse(status_code=status_for_message(message), content={"error": message})
