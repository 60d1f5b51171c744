# src/crowdcred/ingest/serpapi.py

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from crowdcred.ingest.base import SourceUnavailableError, VerificationSource
from crowdcred.normalize.schema import NewsArticle, Place, WebResult

if TYPE_CHECKING:
    from crowdcred.core.config import SerpApiConfig

logger = logging.getLogger(__name__)


class SerpApiSource(VerificationSource):
    """
    Verification source backed by SerpApi's Google News, Google Search and
    Google Maps engines.
    """

    def __init__(
        self, config: "SerpApiConfig", session: Optional[requests.Session] = None
    ):
        """
        Args:
            config: SerpApi section of the CrowdCred configuration
            session: Optional pre-built HTTP session (defaults to one with retries)
        """
        self.enabled = config.enabled
        self.api_key = config.api_key.get_secret_value()
        self.base_url = config.base_url
        self.country = config.country
        self.language = config.language
        self.timeout = config.timeout_seconds
        self.session = session or self._create_session(config.max_retries)

    def _create_session(self, max_retries: int) -> requests.Session:
        session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def _query(self, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.enabled:
            raise SourceUnavailableError("SerpApi source disabled in config")
        if not self.api_key:
            raise SourceUnavailableError("SerpApi API key missing")

        request_params = {"api_key": self.api_key, **params}
        engine = params.get("engine")
        logger.debug(f"SerpApi request: engine={engine}, q={params.get('q')}")

        try:
            response = self.session.get(
                self.base_url, params=request_params, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise SourceUnavailableError(f"SerpApi {engine} request failed: {e}") from e

        if response.status_code == 401:
            raise SourceUnavailableError("SerpApi: Invalid or missing API key (401)")
        elif response.status_code == 429:
            raise SourceUnavailableError("SerpApi: Rate limit exceeded (429)")
        try:
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise SourceUnavailableError(f"SerpApi {engine} bad response: {e}") from e

        if not isinstance(data, dict):
            raise SourceUnavailableError(f"SerpApi {engine} returned non-object payload")
        if data.get("error"):
            raise SourceUnavailableError(f"SerpApi {engine} error: {data['error']}")
        return data

    def search_news(self, query: str) -> List[NewsArticle]:
        data = self._query(
            {
                "engine": "google_news",
                "q": query,
                "gl": self.country,
                "hl": self.language,
            }
        )
        articles = []
        for item in data.get("news_results") or []:
            source = item.get("source") or ""
            # Newer responses nest the publisher as {"name": ..., "icon": ...}
            if isinstance(source, dict):
                source = source.get("name") or ""
            articles.append(
                NewsArticle(
                    title=item.get("title") or "",
                    snippet=item.get("snippet") or "",
                    source=str(source),
                    date=str(item.get("date") or ""),
                    link=item.get("link") or "",
                )
            )
        return articles

    def search_web(self, query: str, num: int = 10) -> List[WebResult]:
        data = self._query(
            {
                "engine": "google",
                "q": query,
                "gl": self.country,
                "hl": self.language,
                "num": num,
            }
        )
        return [
            WebResult(
                title=item.get("title") or "",
                snippet=item.get("snippet") or "",
                link=item.get("link") or "",
            )
            for item in data.get("organic_results") or []
        ]

    def search_places(
        self, query: str, longitude: float, latitude: float
    ) -> List[Place]:
        data = self._query(
            {
                "engine": "google_maps",
                "type": "search",
                "q": query,
                "ll": f"@{latitude},{longitude},14z",
            }
        )
        places = []
        for item in data.get("local_results") or []:
            rating = item.get("rating")
            places.append(
                Place(
                    title=item.get("title") or "",
                    rating=float(rating) if isinstance(rating, (int, float)) else None,
                    category=item.get("type") or "",
                )
            )
        return places
