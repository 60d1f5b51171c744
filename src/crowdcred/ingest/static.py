# src/crowdcred/ingest/static.py

import logging
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar, Union

from crowdcred.ingest.base import VerificationSource
from crowdcred.normalize.schema import NewsArticle, Place, WebResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A canned answer: a fixed list, an exception to raise, or a function of the query
Canned = Union[Sequence[T], BaseException, Callable[[str], Sequence[T]]]


# Simulated upstream answers for demos without a SerpApi key
DEMO_NEWS = [
    NewsArticle(
        title="Multi-vehicle collision slows evening traffic",
        snippet="Commuters faced long delays after a pileup near the junction.",
        source="The Times of India",
        date="1 hour ago",
    ),
    NewsArticle(
        title="Traffic police divert vehicles after crash",
        snippet="Diversions remain in place on the main road.",
        source="Local Daily",
        date="3 hours ago",
    ),
]
DEMO_WEB = [
    WebResult(
        title="Traffic advisory issued today",
        snippet="City traffic police report congestion following an accident.",
        link="https://traffic.police.example.gov.in/advisory",
    ),
    WebResult(
        title="Live updates: road closures",
        snippet="Latest updates on closures across the city.",
        link="https://news.example.com/live",
    ),
]
DEMO_PLACES = [
    Place(title="Central Junction Signal", rating=4.1, category="Intersection"),
    Place(title="City Mall", rating=4.3, category="Shopping mall"),
]


class StaticVerificationSource(VerificationSource):
    """
    Verification source that answers from canned data.

    Used in mock mode and as a test double. Passing an exception instance for
    a capability makes every call to it raise that exception.
    """

    def __init__(
        self,
        news: Optional[Canned[NewsArticle]] = None,
        web: Optional[Canned[WebResult]] = None,
        places: Optional[Canned[Place]] = None,
    ):
        self.news = news if news is not None else []
        self.web = web if web is not None else []
        self.places = places if places is not None else []
        self.calls: List[Tuple[str, str]] = []

    @classmethod
    def demo(cls) -> "StaticVerificationSource":
        logger.info("[MOCK] Using simulated verification data")
        return cls(news=DEMO_NEWS, web=DEMO_WEB, places=DEMO_PLACES)

    def _answer(self, kind: str, canned: Canned[T], query: str) -> List[T]:
        self.calls.append((kind, query))
        if isinstance(canned, BaseException):
            raise canned
        if callable(canned):
            return list(canned(query))
        return list(canned)

    def search_news(self, query: str) -> List[NewsArticle]:
        return self._answer("news", self.news, query)

    def search_web(self, query: str, num: int = 10) -> List[WebResult]:
        return self._answer("web", self.web, query)[:num]

    def search_places(
        self, query: str, longitude: float, latitude: float
    ) -> List[Place]:
        return self._answer("places", self.places, query)
