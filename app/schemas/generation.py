from pydantic import BaseModel, Field
from typing import List


class GenerateRequest(BaseModel):
    topic: str = Field(min_length=2)


class GeneratedTasksResponse(BaseModel):
    """Tâches proposées par l'IA, rien n'est enregistré"""
    category: str
    tasks: List[str]
