# src/crowdcred/credibility/registry.py

import logging
from typing import List, Optional, Sequence

from crowdcred.credibility.reputation import ReputationProvider, StaticReputationProvider
from crowdcred.credibility.signals import (
    ImageEvaluator,
    LocationEvaluator,
    NewsEvaluator,
    ReputationEvaluator,
    SearchEvaluator,
    SignalEvaluator,
    TrendEvaluator,
)
from crowdcred.ingest.base import VerificationSource
from crowdcred.normalize.schema import ReportInput

logger = logging.getLogger(__name__)


class SignalRegistry:
    """
    Ordered set of signal evaluators.

    The order fixes how reasons are joined and how the breakdown is laid out;
    it has no effect on the numeric score.
    """

    def __init__(self, evaluators: Sequence[SignalEvaluator]):
        names = [evaluator.name for evaluator in evaluators]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate signal names in registry: {names}")
        self.evaluators: List[SignalEvaluator] = list(evaluators)

    @classmethod
    def default(
        cls,
        source: VerificationSource,
        reputation: Optional[ReputationProvider] = None,
    ) -> "SignalRegistry":
        """Build the standard News, Search, Location, Image, Trend, Reputation lineup."""
        return cls(
            [
                NewsEvaluator(source),
                SearchEvaluator(source),
                LocationEvaluator(source),
                ImageEvaluator(),
                TrendEvaluator(source),
                ReputationEvaluator(reputation or StaticReputationProvider()),
            ]
        )

    @property
    def names(self) -> List[str]:
        return [evaluator.name for evaluator in self.evaluators]

    def select(self, report: ReportInput) -> List[SignalEvaluator]:
        """Return the evaluators that apply to this report, in registry order."""
        selected = [e for e in self.evaluators if e.applies_to(report)]
        logger.debug(f"Selected signals: {[e.name for e in selected]}")
        return selected
