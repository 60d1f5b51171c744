# src/crowdcred/credibility/signals/news.py

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil import parser as date_parser

from crowdcred.credibility.signals.base import SignalEvaluator
from crowdcred.credibility.sources import is_recognized_outlet
from crowdcred.ingest.base import VerificationSource
from crowdcred.normalize.schema import ReportInput, SignalResult
from crowdcred.normalize.transformer import extract_keywords

logger = logging.getLogger(__name__)

# Absolute publication dates younger than this count as recent
RECENT_WINDOW = timedelta(hours=24)


def is_recent(date_text: str, now: Optional[datetime] = None) -> bool:
    """
    Decide whether a news result was published recently.

    Relative dates ("5 minutes ago", "2 hours ago", "now") are recent when
    expressed in minutes or hours. Absolute dates are parsed and compared
    against RECENT_WINDOW.
    """
    text = (date_text or "").strip().lower()
    if not text:
        return False
    if "minute" in text or "hour" in text or text == "now":
        return True

    try:
        published = date_parser.parse(date_text)
    except (ValueError, OverflowError):
        return False

    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return now - published < RECENT_WINDOW


class NewsEvaluator(SignalEvaluator):
    """Corroborates the incident against current news coverage."""

    name = "news_verification"
    max_score = 30
    fallback_score = 5
    fallback_reason = "News verification unavailable"
    evidence_source = "News Search"

    def __init__(self, source: VerificationSource):
        self.source = source

    def build_query(self, report: ReportInput) -> str:
        keywords = " ".join(extract_keywords(report.description))
        return f"{report.category.lower()} {report.location_name} {keywords}".strip()

    def _evaluate(self, report: ReportInput) -> SignalResult:
        query = self.build_query(report)
        articles = self.source.search_news(query)

        score = 0
        news_count = len(articles)
        recent_news = any(is_recent(article.date) for article in articles)

        if recent_news:
            score += 20  # Strong recent news correlation
        elif news_count > 2:
            score += 15
        elif news_count > 0:
            score += 10

        if any(is_recognized_outlet(article.source) for article in articles):
            score += 5

        if recent_news:
            summary = "Recent news confirms incident"
        elif news_count > 0:
            summary = f"{news_count} related articles found"
        else:
            summary = "No recent news correlation"

        return SignalResult(
            score=min(self.max_score, score),
            reason=f"News verification: {summary}",
            evidence={
                "source": self.evidence_source,
                "articles_found": news_count,
                "recent_articles": recent_news,
                "search_query": query,
                "top_sources": [article.source for article in articles[:3]],
            },
        )
