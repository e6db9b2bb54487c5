from __future__ import annotations

from abc import ABC, abstractmethod

import httpx

from models.status import RawStatusDocument


class StatusProviderError(Exception):
    """Base for failures that make one region's document unavailable."""

    def __init__(self, region: str, message: str) -> None:
        super().__init__(message)
        self.region = region


class FetchError(StatusProviderError):
    """Network failure, non-2xx response or a body that is not JSON."""


class MalformedDocumentError(StatusProviderError):
    """The body was JSON but not a status document."""


class StatusProvider(ABC):
    """Abstract base for regional status document sources.

    A shared ``httpx.AsyncClient`` is injected at construction time so
    that every region fetch reuses one connection pool.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name (e.g. 'Riot')."""

    @abstractmethod
    async def fetch_region(self, base_url: str, region: str) -> RawStatusDocument:
        """Fetch and decode the status document for one region.

        Implementations raise ``StatusProviderError`` subclasses on any
        failure; they never return a partial document.
        """
