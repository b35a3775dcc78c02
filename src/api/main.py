import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.deps import close_author_gateway, get_settings
from src.api.errors import install_error_handlers
from src.rules.loader import load_rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and prepare the schema on startup (fail-fast)
    try:
        load_rules(settings.rules_path)
        logger.info("Rules loaded from %s", settings.rules_path)
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        SQLiteMigrator(settings.db_path, str(settings.migrations_dir)).run_migrations()
    except Exception as e:
        logger.critical("Startup failed: %s", e)
        sys.exit(1)

    yield

    close_author_gateway()


app = FastAPI(
    title="Editorial Publications API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

install_error_handlers(app)

# --- Routers ---
from src.api.routes import publications  # noqa: E402

app.include_router(publications.router, prefix="/api/publications", tags=["Publications"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "publications"}
