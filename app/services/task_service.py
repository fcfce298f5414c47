"""Task service"""

from sqlalchemy import and_, func, true, update
from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from app.core.errors import NotFound, ValidationError
from app.models.task import Task, DEFAULT_CATEGORY


def _matches(column, value: Optional[str]):
    # Filtre absent (ou vide) -> prédicat toujours vrai
    if not value:
        return true()
    return column == value


def _owned(user_id: str, *predicates):
    return and_(Task.user_id == user_id, *predicates)


def list_topics(db: Session, user_id: str, category: Optional[str] = None) -> List[Dict[str, str]]:
    """Topics du user (couple topic/catégorie), le plus récemment alimenté en premier."""
    rows = db.query(Task.topic, Task.category).filter(
        _owned(user_id, _matches(Task.category, category))
    ).group_by(
        Task.topic, Task.category
    ).order_by(
        func.max(Task.created_at).desc(),
        func.max(Task.id).desc()
    ).all()

    return [{"topic": row.topic, "category": row.category} for row in rows]


def list_categories(db: Session, user_id: str) -> List[str]:
    rows = db.query(Task.category).filter(
        Task.user_id == user_id
    ).distinct().order_by(Task.category.asc()).all()

    return [row.category for row in rows]


def list_tasks(db: Session, user_id: str, topic: Optional[str] = None) -> List[Task]:
    return db.query(Task).filter(
        _owned(user_id, _matches(Task.topic, topic))
    ).order_by(Task.created_at.desc(), Task.id.desc()).all()


def resolve_category(category: Optional[str]) -> str:
    if category is None or not category.strip():
        return DEFAULT_CATEGORY
    return category


def create_tasks(
    db: Session,
    user_id: str,
    topic: str,
    contents: List[str],
    category: Optional[str] = None
) -> List[Task]:
    if not contents:
        raise ValidationError(
            "Invalid request data",
            details=[{"field": "contents", "message": "At least one task content is required"}]
        )

    category = resolve_category(category)
    new_tasks = [
        Task(user_id=user_id, topic=topic, category=category, content=content)
        for content in contents
    ]
    db.add_all(new_tasks)
    db.commit()
    for task in new_tasks:
        db.refresh(task)
    return new_tasks


def _get_owned_task(db: Session, user_id: str, task_id: int) -> Task:
    # Une tâche d'un autre user est traitée comme inexistante
    task = db.query(Task).filter(
        Task.id == task_id,
        Task.user_id == user_id
    ).first()

    if not task:
        raise NotFound("Task not found")

    return task


def update_task(db: Session, user_id: str, task_id: int, changes: dict) -> Task:
    values = {field: changes[field] for field in ("content", "is_completed") if field in changes}
    if not values:
        return _get_owned_task(db, user_id, task_id)

    # Un seul UPDATE ... RETURNING, filtré sur l'id ET le user
    task = db.execute(
        update(Task)
        .where(Task.id == task_id, Task.user_id == user_id)
        .values(**values)
        .returning(Task)
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()

    if task is None:
        db.rollback()
        raise NotFound("Task not found")

    # détachée avant le commit pour garder les valeurs renvoyées par RETURNING
    db.expunge(task)
    db.commit()
    return task


def delete_task(db: Session, user_id: str, task_id: int) -> None:
    deleted = db.query(Task).filter(
        Task.id == task_id,
        Task.user_id == user_id
    ).delete(synchronize_session=False)

    if deleted == 0:
        db.rollback()
        raise NotFound("Task not found")

    db.commit()


def delete_topic(db: Session, user_id: str, topic: str) -> int:
    deleted = db.query(Task).filter(
        Task.user_id == user_id,
        Task.topic == topic
    ).delete(synchronize_session=False)

    if deleted == 0:
        db.rollback()
        raise NotFound("Topic not found or no tasks to delete")

    db.commit()
    return deleted
