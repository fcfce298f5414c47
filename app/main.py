import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.database import init_db
from app.core.error_handlers import register_error_handlers
from app.core.logging import setup_logging
from app.routers import health, topics, tasks, generate

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    # DATABASE_URL et GEMINI_API_KEY manquants = on ne démarre pas
    settings.check_required()
    init_db()
    logger.info("AI Task Generator API started")
    yield
    logger.info("AI Task Generator API shutting down")


app = FastAPI(
    title="AI Task Generator API",
    version="1.0.0",
    lifespan=lifespan,
    openapi_url="/doc",
    docs_url="/",
    redoc_url=None
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms}ms",
        extra={"path": request.url.path, "status_code": response.status_code, "elapsed_ms": elapsed_ms},
    )
    return response


register_error_handlers(app)

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(topics.router, prefix="/api")
app.include_router(tasks.router, prefix="/api")
app.include_router(generate.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
