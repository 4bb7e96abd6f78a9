"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from qa_forum.presentation.api.v1.endpoints.health import router as health_router
from qa_forum.presentation.api.v1.endpoints.questions import router as questions_router
from qa_forum.presentation.api.v1.endpoints.answers import router as answers_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(questions_router)
router.include_router(answers_router)
