# src/crowdcred/credibility/signals/location.py

from crowdcred.credibility.signals.base import SignalEvaluator
from crowdcred.credibility.sources import TRAFFIC_PLACE_MARKERS, contains_any
from crowdcred.ingest.base import VerificationSource
from crowdcred.normalize.schema import ReportInput, SignalResult


class LocationEvaluator(SignalEvaluator):
    """Checks that the reported place exists around the reported coordinate."""

    name = "location_context"
    max_score = 15
    fallback_score = 5
    fallback_reason = "Basic location validation"
    evidence_source = "Places Search"

    def __init__(self, source: VerificationSource):
        self.source = source

    def _evaluate(self, report: ReportInput) -> SignalResult:
        places = self.source.search_places(
            report.location_name, report.longitude, report.latitude
        )

        score = 5  # Base score for valid coordinates
        if places:
            score += 5
            # Rated places are well-known landmarks
            if any(place.rating for place in places):
                score += 3
            if any(
                contains_any(place.title.lower(), TRAFFIC_PLACE_MARKERS)
                for place in places
            ):
                score += 2

        return SignalResult(
            score=min(self.max_score, score),
            reason=f"Location verified: {len(places)} places found nearby",
            evidence={
                "source": self.evidence_source,
                "places_found": len(places),
                "coordinates_valid": True,
                "location_name": report.location_name,
            },
        )
