# src/crowdcred/credibility/signals/reputation.py

from crowdcred.credibility.reputation import ReputationProvider
from crowdcred.credibility.signals.base import SignalEvaluator
from crowdcred.normalize.schema import ReportInput, SignalResult


class ReputationEvaluator(SignalEvaluator):
    """Adds the reporter's reputation bonus."""

    name = "user_reputation"
    max_score = 5
    fallback_score = 0
    fallback_reason = "User reputation unavailable"
    evidence_source = "User History"

    def __init__(self, provider: ReputationProvider):
        self.provider = provider

    def _evaluate(self, report: ReportInput) -> SignalResult:
        bonus = max(0, min(self.max_score, self.provider.lookup(report.user_id)))
        return SignalResult(
            score=bonus,
            reason="User reputation applied",
            evidence={"source": self.evidence_source, "bonus": bonus},
        )
