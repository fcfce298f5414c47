from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from app.core.database import get_db
from app.core.security import get_current_user_id
from app.schemas.task import TopicListResponse, CategoryListResponse, MessageResponse
from app.services import task_service

# Topics et catégories ne sont pas des tables : ce sont des regroupements de tâches
router = APIRouter(tags=["topics"])


@router.get("/topics", response_model=TopicListResponse)
def list_topics(
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    return {"topics": task_service.list_topics(db, user_id, category=category)}


@router.get("/categories", response_model=CategoryListResponse)
def list_categories(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    return {"categories": task_service.list_categories(db, user_id)}


@router.delete("/topics/{topic}", response_model=MessageResponse)
def delete_topic(
    topic: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    # Supprime toutes les tâches du topic pour ce user
    task_service.delete_topic(db, user_id, topic)
    return {"message": f'Topic "{topic}" and its tasks deleted successfully.'}
