import sqlite3
from datetime import datetime
from typing import Any, Protocol

from src.adapters.clock import SystemClock
from src.domain.entities import Page, Publication, PublicationStatus


class ConcurrentUpdateError(Exception):
    """Raised when a save loses an optimistic-lock race."""

    def __init__(self, publication_id: int | None, expected_version: int) -> None:
        self.publication_id = publication_id
        self.expected_version = expected_version
        super().__init__(
            f"Publication {publication_id} was modified concurrently "
            f"(expected version {expected_version})"
        )


class _Clock(Protocol):
    def now_utc(self) -> datetime: ...


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLitePublicationRepo:
    def __init__(self, db_path: str, clock: _Clock | None = None):
        self.db_path = db_path
        self.clock = clock or SystemClock()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def save(self, publication: Publication) -> Publication:
        now = self.clock.now_utc()
        conn = self._get_conn()
        try:
            if publication.id is None:
                saved = self._insert(conn, publication, now)
            else:
                saved = self._update(conn, publication, now)
            conn.commit()
            return saved
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _insert(self, conn: sqlite3.Connection, pub: Publication, now: datetime) -> Publication:
        cursor = conn.execute(
            """
            INSERT INTO publications (
                title, content, author_id, status,
                review_comments, editor_name, rejection_reason,
                version, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, 1, ?, ?)
            """,
            (
                pub.title,
                pub.content,
                pub.author_id,
                pub.status.value,
                pub.review_comments,
                pub.editor_name,
                pub.rejection_reason,
                now.isoformat(),
                now.isoformat(),
            ),
        )
        return pub.model_copy(
            update={
                "id": cursor.lastrowid,
                "version": 1,
                "created_at": now,
                "updated_at": now,
            }
        )

    def _update(self, conn: sqlite3.Connection, pub: Publication, now: datetime) -> Publication:
        # created_at is never rewritten
        cursor = conn.execute(
            """
            UPDATE publications SET
                title = ?,
                content = ?,
                author_id = ?,
                status = ?,
                review_comments = ?,
                editor_name = ?,
                rejection_reason = ?,
                version = version + 1,
                updated_at = ?
            WHERE id = ? AND version = ?
            """,
            (
                pub.title,
                pub.content,
                pub.author_id,
                pub.status.value,
                pub.review_comments,
                pub.editor_name,
                pub.rejection_reason,
                now.isoformat(),
                pub.id,
                pub.version,
            ),
        )
        if cursor.rowcount == 0:
            raise ConcurrentUpdateError(pub.id, pub.version)
        return pub.model_copy(update={"version": pub.version + 1, "updated_at": now})

    def find_by_id(self, publication_id: int) -> Publication | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM publications WHERE id = ?", (publication_id,)
            ).fetchone()
            if not row:
                return None
            return self._row_to_publication(row)
        finally:
            conn.close()

    def find_all(self, page: int, size: int) -> Page[Publication]:
        return self._page("", (), page, size)

    def find_by_author(self, author_id: int, page: int, size: int) -> Page[Publication]:
        return self._page("WHERE author_id = ?", (author_id,), page, size)

    def _page(self, where: str, params: tuple[Any, ...], page: int, size: int) -> Page[Publication]:
        conn = self._get_conn()
        try:
            total = conn.execute(
                f"SELECT COUNT(*) AS n FROM publications {where}", params
            ).fetchone()["n"]
            rows = conn.execute(
                f"SELECT * FROM publications {where} ORDER BY id ASC LIMIT ? OFFSET ?",
                (*params, size, page * size),
            ).fetchall()
            return Page[Publication](
                items=[self._row_to_publication(r) for r in rows],
                page=page,
                size=size,
                total=total,
            )
        finally:
            conn.close()

    def _row_to_publication(self, row: dict[str, Any]) -> Publication:
        return Publication(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            author_id=row["author_id"],
            status=PublicationStatus(row["status"]),
            review_comments=row["review_comments"],
            editor_name=row["editor_name"],
            rejection_reason=row["rejection_reason"],
            version=row["version"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
