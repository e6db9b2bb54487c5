from __future__ import annotations

import logging

import httpx

from models.status import DocumentError, RawStatusDocument
from providers.base import FetchError, MalformedDocumentError, StatusProvider

_DOCUMENT_SUFFIX = ".json"

log = logging.getLogger(__name__)


def region_url(base_url: str, region: str) -> str:
    return f"{base_url}{region}{_DOCUMENT_SUFFIX}"


class RiotStatusProvider(StatusProvider):
    """Provider adapter for per-region JSON status documents.

    The document for a region lives at ``<base><region>.json``.  Transport
    errors are retried up to ``max_retries`` times with no delay; HTTP
    error statuses and bad bodies are not retried.
    """

    def __init__(self, client: httpx.AsyncClient, max_retries: int = 0) -> None:
        super().__init__(client)
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._max_retries = max_retries

    @property
    def name(self) -> str:
        return "Riot"

    async def _get(self, url: str, region: str) -> httpx.Response:
        attempt = 0
        while True:
            try:
                return await self._client.get(url)
            except httpx.TransportError as exc:
                if attempt >= self._max_retries:
                    raise FetchError(region, f"request to {url} failed: {exc}") from exc
                attempt += 1
                log.warning(
                    "[%s] %s: %s, retrying (%d/%d)",
                    self.name, region, exc, attempt, self._max_retries,
                )
            except httpx.HTTPError as exc:
                raise FetchError(region, f"request to {url} failed: {exc}") from exc

    async def fetch_region(self, base_url: str, region: str) -> RawStatusDocument:
        url = region_url(base_url, region)
        resp = await self._get(url, region)

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                region, f"unexpected status {resp.status_code} from {url}"
            ) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise FetchError(region, f"response from {url} is not JSON") from exc

        try:
            document = RawStatusDocument.from_dict(payload)
        except DocumentError as exc:
            raise MalformedDocumentError(region, f"malformed document from {url}: {exc}") from exc

        log.debug(
            "[%s] %s: %d maintenance(s), %d incident(s)",
            self.name, region, len(document.maintenances), len(document.incidents),
        )
        return document
