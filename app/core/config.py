from os import getenv
from typing import List


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    DATABASE_URL = getenv("DATABASE_URL")
    GEMINI_API_KEY = getenv("GEMINI_API_KEY")
    GEMINI_MODEL = getenv("GEMINI_MODEL", "gemini-1.5-pro-latest")
    GEMINI_BASE_URL = getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
    GENERATION_TIMEOUT = int(getenv("GENERATION_TIMEOUT", "60"))  # secondes

    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_ALGORITHM = getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "60"))

    CORS_ORIGINS = _split(getenv("CORS_ORIGINS", "*"))
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = getenv("LOG_FORMAT", "text")  # "text" ou "json"
    PORT = int(getenv("PORT", "3001"))

    REQUIRED = ("DATABASE_URL", "GEMINI_API_KEY")

    def missing_required(self) -> List[str]:
        return [name for name in self.REQUIRED if not getattr(self, name)]

    def check_required(self):
        # Sans base ni clé API le service ne peut pas démarrer
        missing = self.missing_required()
        if missing:
            raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")

settings = Settings()
