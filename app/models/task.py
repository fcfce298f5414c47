"""Task model"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, false, func
from app.core.database import Base

DEFAULT_CATEGORY = "General"
LABEL_MAX_LENGTH = 256


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(LABEL_MAX_LENGTH), nullable=False, index=True)

    topic = Column(String(LABEL_MAX_LENGTH), nullable=False, index=True)
    category = Column(String(LABEL_MAX_LENGTH), nullable=False, default=DEFAULT_CATEGORY, server_default=DEFAULT_CATEGORY)
    content = Column(Text, nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False, server_default=false())

    parent_id = Column(Integer, nullable=True)  # réservé, aucune route ne l'écrit

    created_at = Column(DateTime, nullable=False, server_default=func.now())
