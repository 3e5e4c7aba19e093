# /readme_service/api/generate.py
# This module defines the API endpoint that generates a README for a GitHub repository.
from fastapi import APIRouter, Depends, Request

from ..services.readme_service import ReadmeService
from .schemas import ErrorResponse, GenerateReadmeRequest, GenerateReadmeResponse, HealthResponse

router = APIRouter()


def get_service(request: Request) -> ReadmeService:
    # created in main.lifespan; tests swap it through app.dependency_overrides
    svc = getattr(request.app.state, "svc", None)
    if svc is None:
        raise RuntimeError("Service not initialized")
    return svc


@router.post(
    "/api/generate-readme",
    response_model=GenerateReadmeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing field or invalid repository URL"},
        404: {"model": ErrorResponse, "description": "Repository not found"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        503: {"model": ErrorResponse, "description": "GEMINI_API_KEY is not configured"},
    },
)
async def generate_readme(payload: GenerateReadmeRequest, svc: ReadmeService = Depends(get_service)):
    return await svc.generate_readme(
        repo_url=payload.repo_url,
        sections=payload.sections,
        tone=payload.tone,
        language=payload.language,
    )


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")
