"""SQLite publication repository against a migrated temp database."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import ConcurrentUpdateError, SQLitePublicationRepo
from src.domain.entities import Publication, PublicationStatus

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "migrations"


class StepClock:
    def __init__(self) -> None:
        self._now = datetime(2025, 1, 1, 9, 0, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        self._now += timedelta(minutes=1)
        return self._now


@pytest.fixture
def repo(migrated_db_path: str) -> SQLitePublicationRepo:
    return SQLitePublicationRepo(migrated_db_path, clock=StepClock())


def new_pub(author_id: int = 1, title: str = "A valid title") -> Publication:
    return Publication(title=title, content="Body", author_id=author_id)


def test_insert_assigns_identity_and_timestamps(repo: SQLitePublicationRepo) -> None:
    saved = repo.save(new_pub())

    assert saved.id is not None
    assert saved.version == 1
    assert saved.status == PublicationStatus.DRAFT
    assert saved.created_at is not None
    assert saved.created_at == saved.updated_at


def test_round_trip(repo: SQLitePublicationRepo) -> None:
    saved = repo.save(new_pub())

    loaded = repo.find_by_id(saved.id)  # type: ignore[arg-type]

    assert loaded == saved


def test_find_missing(repo: SQLitePublicationRepo) -> None:
    assert repo.find_by_id(12345) is None


def test_update_keeps_created_at_and_bumps_version(repo: SQLitePublicationRepo) -> None:
    saved = repo.save(new_pub())
    saved.status = PublicationStatus.IN_REVIEW
    saved.editor_name = "J. Smith"

    updated = repo.save(saved)
    loaded = repo.find_by_id(saved.id)  # type: ignore[arg-type]

    assert loaded is not None
    assert loaded.status == PublicationStatus.IN_REVIEW
    assert loaded.editor_name == "J. Smith"
    assert loaded.version == 2 == updated.version
    assert loaded.created_at == saved.created_at
    assert loaded.updated_at is not None and loaded.created_at is not None
    assert loaded.updated_at > loaded.created_at


def test_stale_write_is_rejected(repo: SQLitePublicationRepo) -> None:
    saved = repo.save(new_pub())
    first = repo.find_by_id(saved.id)  # type: ignore[arg-type]
    second = repo.find_by_id(saved.id)  # type: ignore[arg-type]
    assert first is not None and second is not None

    first.status = PublicationStatus.IN_REVIEW
    repo.save(first)

    second.status = PublicationStatus.IN_REVIEW
    with pytest.raises(ConcurrentUpdateError):
        repo.save(second)

    loaded = repo.find_by_id(saved.id)  # type: ignore[arg-type]
    assert loaded is not None
    assert loaded.version == 2


def test_find_all_pages_in_id_order(repo: SQLitePublicationRepo) -> None:
    ids = [repo.save(new_pub(title=f"Title number {i}")).id for i in range(5)]

    first = repo.find_all(0, 2)
    last = repo.find_all(2, 2)

    assert [p.id for p in first.items] == ids[:2]
    assert [p.id for p in last.items] == ids[4:]
    assert first.total == 5
    assert first.total_pages == 3


def test_page_past_the_end(repo: SQLitePublicationRepo) -> None:
    repo.save(new_pub())

    page = repo.find_all(3, 10)

    assert page.items == []
    assert page.total == 1


def test_find_by_author(repo: SQLitePublicationRepo) -> None:
    repo.save(new_pub(author_id=1))
    repo.save(new_pub(author_id=2))
    repo.save(new_pub(author_id=2))

    page = repo.find_by_author(2, 0, 10)

    assert page.total == 2
    assert {p.author_id for p in page.items} == {2}


def test_migrations_are_idempotent(tmp_path: Path) -> None:
    db_path = str(tmp_path / "publications.db")
    migrator = SQLiteMigrator(db_path, str(MIGRATIONS_DIR))

    assert migrator.run_migrations() == ["001_publications.sql"]
    assert migrator.run_migrations() == []
