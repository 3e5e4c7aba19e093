# /readme_service/api/routes.py
# This module defines the main API router for the README Generator application, which includes all the
# individual endpoint routers.
from fastapi import APIRouter

from .generate import router as generate_router

router = APIRouter()
router.include_router(generate_router)
