import os
import subprocess
from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from commerce_api.core_settings import get_settings
from commerce_api.core.logging_config import get_logger
from commerce_api.domain.models import Base

logger = get_logger(__name__)

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

@lru_cache
def get_engine() -> Engine:
    settings = get_settings()
    return create_engine(settings.database_url, echo=False, pool_pre_ping=True)

@lru_cache
def get_session_factory() -> sessionmaker:
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, expire_on_commit=False)

def init_models(engine: Engine) -> None:
    Base.metadata.create_all(engine)

def ping(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1")).fetchone()

def run_migrations() -> bool:
    """Run ``alembic upgrade head`` from the project root. Returns True on success."""
    logger.info("Running database migrations")
    try:
        result = subprocess.run(
            ["alembic", "upgrade", "head"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            check=False
        )
    except OSError as e:
        logger.error(f"Migration error: {e}")
        return False
    if result.returncode != 0:
        logger.warning(f"Migration output: {result.stderr}")
        return False
    logger.info("Database migrations completed")
    return True
