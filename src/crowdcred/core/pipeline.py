# src/crowdcred/core/pipeline.py

import logging
from typing import Any, Mapping, Optional, Union

from crowdcred.core.config import CrowdCredConfig
from crowdcred.credibility.registry import SignalRegistry
from crowdcred.credibility.reputation import ReputationProvider, StaticReputationProvider
from crowdcred.credibility.scorer import ConfidenceScorer
from crowdcred.credibility.status import classify_status
from crowdcred.ingest.base import VerificationSource
from crowdcred.ingest.serpapi import SerpApiSource
from crowdcred.ingest.static import StaticVerificationSource
from crowdcred.normalize.schema import ConfidenceResult, ReportInput, ReportStatus

logger = logging.getLogger(__name__)

ReportLike = Union[ReportInput, Mapping[str, Any], str]


def build_source(config: CrowdCredConfig) -> VerificationSource:
    """Pick the verification source the configuration asks for."""
    if config.serpapi.mock_mode:
        return StaticVerificationSource.demo()
    if not config.serpapi.api_key.get_secret_value():
        logger.warning(
            "SerpApi API key missing and mock_mode=false - "
            "external signals will fall back to degraded scores"
        )
    return SerpApiSource(config.serpapi)


class ConfidencePipeline:
    """
    End-to-end confidence scoring for submitted incident reports.

    Wires the configured verification source and reputation provider into the
    signal registry and scorer. Holds no per-report state, so one instance can
    serve concurrent submissions.
    """

    def __init__(
        self,
        config: Optional[CrowdCredConfig] = None,
        source: Optional[VerificationSource] = None,
        reputation: Optional[ReputationProvider] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Validated CrowdCred configuration (defaults if omitted)
            source: Verification source override (e.g. for tests)
            reputation: Reputation provider override
        """
        self.config = config or CrowdCredConfig()
        self.source = source or build_source(self.config)
        self.reputation = reputation or StaticReputationProvider(
            self.config.reputation.default_bonus
        )
        self.registry = SignalRegistry.default(self.source, self.reputation)
        self.scorer = ConfidenceScorer(
            self.registry,
            base_score=self.config.scoring.base_score,
            evaluator_timeout=self.config.scoring.evaluator_timeout_seconds,
            max_workers=self.config.scoring.max_workers,
        )

    def score_report(self, report: ReportLike) -> ConfidenceResult:
        """Score a report; never raises."""
        return self.scorer.score(report)

    def classify(self, result: ConfidenceResult) -> ReportStatus:
        return classify_status(
            result.score,
            verified_threshold=self.config.scoring.verified_threshold,
            unverified_threshold=self.config.scoring.unverified_threshold,
        )


def calculate_confidence(
    report: ReportLike,
    config: Optional[CrowdCredConfig] = None,
    source: Optional[VerificationSource] = None,
) -> ConfidenceResult:
    """
    Score a single report with a throwaway pipeline.

    Args:
        report: ReportInput or raw submission payload
        config: CrowdCred configuration (defaults if omitted)
        source: Verification source override

    Returns:
        ConfidenceResult; the fixed low-confidence default on structural failure.
    """
    return ConfidencePipeline(config=config, source=source).score_report(report)
