# src/crowdcred/credibility/signals/search.py

from crowdcred.credibility.signals.base import SignalEvaluator
from crowdcred.credibility.sources import is_official_url
from crowdcred.ingest.base import VerificationSource
from crowdcred.normalize.schema import ReportInput, SignalResult
from crowdcred.normalize.transformer import extract_keywords


class SearchEvaluator(SignalEvaluator):
    """Looks for web pages that mention the incident's keywords at the location."""

    name = "search_validation"
    max_score = 25
    fallback_score = 5
    fallback_reason = "Search validation unavailable"
    evidence_source = "Web Search"

    num_results = 10

    def __init__(self, source: VerificationSource):
        self.source = source

    def build_query(self, report: ReportInput) -> str:
        return f'"{report.location_name}" {report.category.lower()} incident report today'

    def _evaluate(self, report: ReportInput) -> SignalResult:
        query = self.build_query(report)
        results = self.source.search_web(query, num=self.num_results)
        keywords = extract_keywords(report.description)

        score = 5  # Base score for a completed search
        relevant_results = sum(
            1
            for result in results
            if any(keyword in result.content for keyword in keywords)
        )

        if relevant_results > 5:
            score += 15
        elif relevant_results > 2:
            score += 10
        elif relevant_results > 0:
            score += 5

        # Traffic police, municipal corporation and similar sources
        has_official_sources = any(is_official_url(result.link) for result in results)
        if has_official_sources:
            score += 5

        return SignalResult(
            score=min(self.max_score, score),
            reason=f"Search validation: {relevant_results} relevant results found",
            evidence={
                "source": self.evidence_source,
                "relevant_results": relevant_results,
                "total_results": len(results),
                "search_query": query,
                "has_official_sources": has_official_sources,
            },
        )
