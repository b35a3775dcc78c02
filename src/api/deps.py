import os
import threading
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.authors_http import HttpAuthorGateway
from src.adapters.sqlite.repos import SQLitePublicationRepo
from src.components.lifecycle import AuthorGatewayPort, PublicationLifecycle, PublicationRepoPort
from src.rules.loader import default_rules_path, load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("PUBLICATIONS_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "publications.db")
        self.migrations_dir = self.base_dir / "migrations"
        self.rules_path = default_rules_path()
        # Overrides authors_service.base_url from the rules file
        self.authors_service_url = os.environ.get("AUTHORS_SERVICE_URL")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Repos ---
def get_publication_repo(settings: Settings = Depends(get_settings)) -> PublicationRepoPort:
    return SQLitePublicationRepo(settings.db_path)


# --- Author registry ---
# One pooled HTTP client per process.
_author_gateway_instance: HttpAuthorGateway | None = None
_author_gateway_lock = threading.Lock()


def get_author_gateway(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> AuthorGatewayPort:
    """Get author gateway singleton."""
    global _author_gateway_instance
    with _author_gateway_lock:
        if _author_gateway_instance is None:
            _author_gateway_instance = HttpAuthorGateway(
                base_url=settings.authors_service_url or rules.authors_service.base_url,
                timeout_seconds=rules.authors_service.timeout_seconds,
            )
        return _author_gateway_instance


def close_author_gateway() -> None:
    global _author_gateway_instance
    with _author_gateway_lock:
        if _author_gateway_instance is not None:
            _author_gateway_instance.close()
            _author_gateway_instance = None


# --- Component ---
def get_lifecycle(
    repo: PublicationRepoPort = Depends(get_publication_repo),
    authors: AuthorGatewayPort = Depends(get_author_gateway),
    rules: Rules = Depends(get_rules),
) -> PublicationLifecycle:
    return PublicationLifecycle(
        repo=repo,
        authors=authors,
        max_workers=rules.enrichment.max_workers,
        title_min_length=rules.publication.title_min_length,
        title_max_length=rules.publication.title_max_length,
    )
