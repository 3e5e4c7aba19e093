# /readme_service/api/schemas.py
# This module defines the request and response schemas for the README Generator API, as well as the
# error response format. Field names on the wire are camelCase.
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateReadmeRequest(BaseModel):
    # Everything is optional here so the service can report the first missing field by name.
    model_config = ConfigDict(populate_by_name=True)

    repo_url: Optional[str] = Field(default=None, alias="repoUrl", description="GitHub URL, github.com/owner/repo or owner/repo")
    sections: Optional[Any] = Field(default=None, description="Map of README section name to bool")
    tone: Optional[str] = None
    language: Optional[str] = None


class DetectedTechStack(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    languages: List[str]
    frameworks: List[str]
    tools: List[str]
    package_manager: Optional[str] = Field(default=None, alias="packageManager")


class ReadmeMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    repo_name: str = Field(alias="repoName")
    full_name: str = Field(alias="fullName")
    detected_tech_stack: DetectedTechStack = Field(alias="detectedTechStack")


class GenerateReadmeResponse(BaseModel):
    success: bool = True
    readme: str
    metadata: ReadmeMetadata


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
