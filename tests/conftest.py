from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.deps import get_rules, get_settings

PROJECT_ROOT = Path(__file__).resolve().parents[1]
MIGRATIONS_DIR = PROJECT_ROOT / "migrations"
RULES_PATH = PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def migrated_db_path(tmp_path):
    """
    Path to a temporary SQLite DB with all migrations applied.
    """
    db_path = str(tmp_path / "publications.db")
    SQLiteMigrator(db_path, str(MIGRATIONS_DIR)).run_migrations()
    return db_path


@pytest.fixture(autouse=True)
def _clear_cached_config():
    # Settings and rules are process-wide caches; keep tests independent of env
    get_settings.cache_clear()
    get_rules.cache_clear()
    yield
    get_settings.cache_clear()
    get_rules.cache_clear()
