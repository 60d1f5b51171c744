# src/crowdcred/ingest/base.py

from abc import ABC, abstractmethod
from typing import List

from crowdcred.normalize.schema import NewsArticle, Place, WebResult


class SourceUnavailableError(RuntimeError):
    """An upstream verification source could not answer a query."""


class VerificationSource(ABC):
    """
    The three search capabilities the signal evaluators rely on.

    Implementations translate a vendor's response into the vendor-neutral
    result models and raise SourceUnavailableError on any upstream failure.
    """

    @abstractmethod
    def search_news(self, query: str) -> List[NewsArticle]:
        ...

    @abstractmethod
    def search_web(self, query: str, num: int = 10) -> List[WebResult]:
        ...

    @abstractmethod
    def search_places(
        self, query: str, longitude: float, latitude: float
    ) -> List[Place]:
        ...
