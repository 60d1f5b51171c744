# src/crowdcred/credibility/signals/base.py

import logging
from abc import ABC, abstractmethod
from typing import Union

from crowdcred.normalize.schema import ReportInput, SignalResult

logger = logging.getLogger(__name__)


class SignalEvaluator(ABC):
    """
    One independent verification signal over a slice of a report.

    Subclasses implement ``_evaluate`` and may raise freely; ``evaluate``
    turns any failure into the signal's fallback result and caps every score
    into ``[0, max_score]``.
    """

    name: str = ""
    max_score: Union[int, float] = 0
    fallback_score: Union[int, float] = 0
    fallback_reason: str = ""
    evidence_source: str = ""

    def applies_to(self, report: ReportInput) -> bool:
        return True

    @abstractmethod
    def _evaluate(self, report: ReportInput) -> SignalResult:
        ...

    def evaluate(self, report: ReportInput) -> SignalResult:
        try:
            result = self._evaluate(report)
        except Exception as e:
            logger.error(f"{self.name} evaluation failed: {e}")
            return self.fallback(e)
        return self._capped(result)

    def fallback(self, error: Union[BaseException, str]) -> SignalResult:
        """Degraded result used when the signal's upstream is unavailable."""
        return SignalResult(
            score=self.fallback_score,
            reason=self.fallback_reason,
            evidence={"source": self.evidence_source, "error": str(error)},
        )

    def _capped(self, result: SignalResult) -> SignalResult:
        score = max(0, min(self.max_score, result.score))
        if score == result.score:
            return result
        return result.model_copy(update={"score": score})
