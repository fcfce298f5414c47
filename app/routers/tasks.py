from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.core.database import get_db
from app.core.security import get_current_user_id
from app.schemas.task import (
    TaskBulkCreate,
    TaskUpdate,
    TaskListResponse,
    TaskEnvelope,
    MessageResponse
)
from app.services import task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=TaskListResponse)
def list_tasks(
    topic: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    return {"tasks": task_service.list_tasks(db, user_id, topic=topic)}


@router.post("/bulk", response_model=TaskListResponse, status_code=status.HTTP_201_CREATED)
def create_tasks_bulk(
    task_data: TaskBulkCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Crée une tâche par contenu, toutes sur le même topic/catégorie.

    Utilisé aussi pour accepter les tâches proposées par /generate.
    """
    new_tasks = task_service.create_tasks(
        db,
        user_id,
        topic=task_data.topic,
        contents=task_data.contents,
        category=task_data.category
    )
    return {"tasks": new_tasks}


@router.put("/{task_id}", response_model=TaskEnvelope)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    task = task_service.update_task(db, user_id, task_id, task_data.changes())
    return {"task": task}


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    task_service.delete_task(db, user_id, task_id)
    return {"message": "Task deleted successfully"}
