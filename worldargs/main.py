"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from worldargs.api.coerce import router as coerce_router
from worldargs.api.environment import router as environment_router
from worldargs.api.health import router as health_router
from worldargs.config import settings
from worldargs.core.logging import get_logger, setup_logging
from worldargs.db.database import SessionLocal, engine as db_engine
from worldargs.db.models import Base
from worldargs.services.coercion_service import CoercionService
from worldargs.services.environment_service import EnvironmentService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    # DB 테이블 생성
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=db_engine)
    logger.info("Database tables created.")

    # 샌드박스 환경 로드
    logger.info("Loading sandbox environment...")
    db_session = SessionLocal()
    environment_service = EnvironmentService(db_session)
    environment_service.load()
    app.state.environment_service = environment_service
    logger.info("Sandbox environment loaded.")

    app.state.coercion_service = CoercionService(settings)
    logger.info(
        "CoercionService initialized (sight=%d, search=%.1f, tolerance=%.1f)",
        settings.SIGHT_DISTANCE,
        settings.ENTITY_SEARCH_DISTANCE,
        settings.ENTITY_TOLERANCE,
    )

    yield

    # 종료 시 정리
    logger.info("Shutting down...")
    db_session.close()


app = FastAPI(title="worldargs", lifespan=lifespan)

app.include_router(health_router)
app.include_router(environment_router)
app.include_router(coerce_router)
