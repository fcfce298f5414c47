"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StringConstraints
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Annotated, Optional, List
from app.models.task import LABEL_MAX_LENGTH

# Le JSON exposé est en camelCase (userId, isCompleted...), le snake_case reste accepté en entrée
camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


# Schemas tâches

class TaskBulkCreate(BaseModel):
    topic: str = Field(min_length=1, max_length=LABEL_MAX_LENGTH)
    category: Optional[str] = Field(None, max_length=LABEL_MAX_LENGTH)  # vide ou absent -> "General"
    contents: List[NonEmptyStr] = Field(min_length=1)

    model_config = camel_config


class TaskUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1)
    is_completed: Optional[StrictBool] = None

    model_config = camel_config

    def changes(self) -> dict:
        # Seuls les champs envoyés (et non null) sont appliqués
        return self.model_dump(exclude_unset=True, exclude_none=True)


class TaskResponse(BaseModel):
    id: int
    user_id: str
    topic: str
    category: str
    content: str
    is_completed: bool
    parent_id: Optional[int]
    created_at: datetime

    model_config = camel_config


class TaskListResponse(BaseModel):
    tasks: List[TaskResponse]


class TaskEnvelope(BaseModel):
    task: TaskResponse


class TopicResponse(BaseModel):
    topic: str
    category: str


class TopicListResponse(BaseModel):
    topics: List[TopicResponse]


class CategoryListResponse(BaseModel):
    categories: List[str]


class MessageResponse(BaseModel):
    message: str
