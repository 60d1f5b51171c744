# src/crowdcred/credibility/signals/trend.py

from crowdcred.credibility.signals.base import SignalEvaluator
from crowdcred.credibility.sources import TRENDING_MARKERS, contains_any
from crowdcred.ingest.base import VerificationSource
from crowdcred.normalize.schema import ReportInput, SignalResult


class TrendEvaluator(SignalEvaluator):
    """Checks whether the incident lines up with what is trending right now."""

    name = "trending_events"
    max_score = 10
    fallback_score = 2
    fallback_reason = "Trending analysis unavailable"
    evidence_source = "Trending Analysis"

    num_results = 5

    def __init__(self, source: VerificationSource):
        self.source = source

    def build_query(self, report: ReportInput) -> str:
        return f"{report.category.lower()} {report.location_name} trending today"

    def _evaluate(self, report: ReportInput) -> SignalResult:
        query = self.build_query(report)
        results = self.source.search_web(query, num=self.num_results)

        score = 2  # Base score
        if results:
            if any(contains_any(result.content, TRENDING_MARKERS) for result in results):
                score += 6
            else:
                score += 2

        trending = score > 5
        summary = (
            "Event aligns with current trends" if trending else "Standard incident report"
        )
        return SignalResult(
            score=min(self.max_score, score),
            reason=f"Trending analysis: {summary}",
            evidence={
                "source": self.evidence_source,
                "search_query": query,
                "trending_correlation": trending,
            },
        )
