from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings


def normalize_url(url: str) -> str:
    # Les hébergeurs fournissent souvent postgresql:// alors qu'on utilise psycopg 3
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def build_engine(url):
    if not url:
        raise RuntimeError("DATABASE_URL is not defined")
    url = normalize_url(url)
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=False, pool_pre_ping=True, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db():
    """Crée la table tasks si elle n'existe pas"""
    import app.models.task  # noqa: F401  (enregistre le modèle sur Base)
    Base.metadata.create_all(bind=engine)


def get_db():
    """Dépendance sessionDB"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
