"""
Router pour la génération de tâches par IA (Gemini).

POST /generate {"topic": "rust"}
→
{"category": "Programming", "tasks": ["...", "...", "...", "...", "..."]}

Rien n'est enregistré ici : le client renvoie les tâches retenues à /tasks/bulk.
"""

import logging

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.security import get_current_user_id
from app.schemas.generation import GenerateRequest, GeneratedTasksResponse
from app.services.ai_service import generate_tasks

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generate"])


@router.post("/generate", response_model=GeneratedTasksResponse)
def generate(
    request: GenerateRequest,
    user_id: str = Depends(get_current_user_id)
):
    logger.info(f"Generating tasks for topic {request.topic!r} (user {user_id})")
    return generate_tasks(
        request.topic,
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        base_url=settings.GEMINI_BASE_URL,
        timeout=settings.GENERATION_TIMEOUT
    )
