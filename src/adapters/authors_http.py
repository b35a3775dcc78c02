"""
HTTP client for the author registry.

Endpoints:
- GET {base_url}/authors/{id}/exists -> JSON boolean
- GET {base_url}/authors/{id}        -> author JSON, 404 if unknown

Every transport problem (connect error, timeout, unexpected status,
unparseable body) surfaces as GatewayUnavailableError. No retries.
"""

from __future__ import annotations

import logging
from types import TracebackType

import httpx
from pydantic import ValidationError

from src.domain.entities import AuthorSummary
from src.domain.errors import AuthorSummaryNotFoundError, GatewayUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class HttpAuthorGateway:
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
        )

    def exists(self, author_id: int) -> bool:
        response = self._get(author_id, f"/authors/{author_id}/exists")
        if response.status_code != httpx.codes.OK:
            raise self._unavailable(author_id, f"unexpected status {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise self._unavailable(author_id, "invalid JSON body") from e
        if not isinstance(body, bool):
            raise self._unavailable(author_id, f"expected boolean, got {body!r}")
        return body

    def fetch_summary(self, author_id: int) -> AuthorSummary:
        response = self._get(author_id, f"/authors/{author_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            raise AuthorSummaryNotFoundError(author_id)
        if response.status_code != httpx.codes.OK:
            raise self._unavailable(author_id, f"unexpected status {response.status_code}")

        try:
            return AuthorSummary.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise self._unavailable(author_id, "malformed author payload") from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpAuthorGateway:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _get(self, author_id: int, path: str) -> httpx.Response:
        try:
            return self._client.get(path)
        except httpx.HTTPError as e:
            raise self._unavailable(author_id, str(e) or type(e).__name__) from e

    def _unavailable(self, author_id: int, reason: str) -> GatewayUnavailableError:
        logger.warning("Author registry call failed for author %s: %s", author_id, reason)
        return GatewayUnavailableError(author_id, reason)
