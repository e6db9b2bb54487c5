from providers.base import (
    FetchError,
    MalformedDocumentError,
    StatusProvider,
    StatusProviderError,
)
from providers.riot_provider import RiotStatusProvider

__all__ = [
    "FetchError",
    "MalformedDocumentError",
    "RiotStatusProvider",
    "StatusProvider",
    "StatusProviderError",
]
