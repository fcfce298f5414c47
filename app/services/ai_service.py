"""
Service Gemini - génération de tâches pour un topic

Un seul appel HTTP, pas de retry, rien n'est écrit en base : les tâches
proposées sont renvoyées au client qui les valide ensuite via /tasks/bulk.
"""

import json
import logging
from datetime import datetime
from typing import Optional

import requests

from app.core.errors import InternalError, UpstreamError
from app.models.task import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-pro-latest"
REQUEST_TIMEOUT = 60
TASKS_PER_TOPIC = 5

TASK_CATEGORIES = [
    "Programming",
    "Health & Fitness",
    "Finance",
    "Education",
    "Career",
    "Travel",
    "Cooking",
    "Home",
    "Hobbies",
    DEFAULT_CATEGORY,
]


def build_prompt(topic: str) -> str:
    categories = ", ".join(f'"{c}"' for c in TASK_CATEGORIES)
    return f"""Generate a list of {TASKS_PER_TOPIC} concise, actionable tasks to learn about {topic}.
Pick the single best category for this topic from: {categories}.
Respond ONLY with a JSON object, no markdown and no explanation, in this exact shape:
{{"category": "<one of the categories above>", "tasks": ["task 1", "task 2", "task 3", "task 4", "task 5"]}}"""


def _candidate_text(result) -> Optional[str]:
    try:
        return result["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None


def _shape(payload) -> dict:
    if not isinstance(payload, dict):
        raise InternalError("Malformed task list received from AI.")

    category = payload.get("category") or DEFAULT_CATEGORY
    tasks = payload.get("tasks") or []

    if not isinstance(category, str):
        raise InternalError("Malformed task list received from AI.")
    if not isinstance(tasks, list) or not all(isinstance(t, str) for t in tasks):
        raise InternalError("Malformed task list received from AI.")

    return {"category": category, "tasks": tasks}


def generate_tasks(
    topic: str,
    api_key: Optional[str],
    model: str = DEFAULT_MODEL,
    base_url: str = GEMINI_BASE_URL,
    timeout: int = REQUEST_TIMEOUT
) -> dict:
    if not api_key:
        logger.error("GEMINI_API_KEY is missing.")
        raise InternalError("Service is not configured.")

    body = {
        "contents": [{"parts": [{"text": build_prompt(topic)}]}],
        "generationConfig": {"responseMimeType": "application/json"},
    }

    start_time = datetime.now()
    try:
        response = requests.post(
            f"{base_url}/models/{model}:generateContent",
            params={"key": api_key},
            json=body,
            timeout=timeout
        )
    except requests.RequestException as e:
        logger.error(f"Gemini request failed: {e}")
        raise UpstreamError("Failed to reach the AI service.") from e

    elapsed_ms = int((datetime.now() - start_time).total_seconds() * 1000)
    logger.info(f"Gemini API responded with status {response.status_code} in {elapsed_ms}ms")

    if not response.ok:
        raise UpstreamError(f"Gemini API error ({response.status_code})")

    try:
        result = response.json()
    except ValueError as e:
        logger.error(f"Gemini returned a non-JSON body: {response.text[:200]}")
        raise UpstreamError("Invalid response from AI.") from e

    text = _candidate_text(result)
    if not isinstance(text, str) or not text.strip():
        logger.error("Missing or malformed content in Gemini response.")
        raise UpstreamError("Received empty response from AI.")

    # Pas d'heuristique de récupération : si ce n'est pas du JSON c'est une erreur amont
    try:
        payload = json.loads(text)
    except ValueError as e:
        logger.error(f"Gemini content is not JSON: {text[:200]}")
        raise UpstreamError("Invalid response from AI.") from e

    return _shape(payload)
