# src/crowdcred/credibility/scorer.py

import logging
import math
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Dict, List, Mapping, Union

from crowdcred.credibility.registry import SignalRegistry
from crowdcred.credibility.signals.base import SignalEvaluator
from crowdcred.normalize.schema import ConfidenceResult, ReportInput, SignalResult
from crowdcred.normalize.transformer import normalize_report_payload

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 25
DEFAULT_REASON = "Error in real-time verification - defaulting to low confidence"


def default_result(error: Union[BaseException, str]) -> ConfidenceResult:
    """Fixed low-confidence result returned when scoring itself breaks down."""
    return ConfidenceResult(
        score=DEFAULT_SCORE,
        reason=DEFAULT_REASON,
        evidence=[],
        breakdown={"error": str(error)},
    )


class ConfidenceScorer:
    """
    Scores an incident report by fanning out to every applicable signal and
    combining their sub-scores into a single 0-100 confidence value.

    Each signal runs in its own worker thread; a slow or failing signal only
    degrades its own sub-score.
    """

    def __init__(
        self,
        registry: SignalRegistry,
        base_score: int = 20,
        evaluator_timeout: float = 8.0,
        max_workers: int = 6,
    ):
        """
        Initialize scorer with configurable parameters.

        Args:
            registry: Ordered signal evaluators to run
            base_score: Points every report starts with
            evaluator_timeout: Seconds to wait for the signal fan-out before
                falling back for unfinished signals
            max_workers: Upper bound on concurrently running signals
        """
        self.registry = registry
        self.base_score = base_score
        self.evaluator_timeout = evaluator_timeout
        self.max_workers = max_workers

    def score(self, report: Union[ReportInput, Mapping[str, Any], str]) -> ConfidenceResult:
        """
        Score a report without ever raising.

        Any failure outside the individual signals (malformed report, broken
        registry) yields the fixed default result instead.
        """
        try:
            return self.aggregate(report)
        except Exception as e:
            logger.error(f"Confidence calculation error: {e}")
            return default_result(e)

    def aggregate(self, report: Union[ReportInput, Mapping[str, Any], str]) -> ConfidenceResult:
        """
        Run all applicable signals and combine their results.

        Args:
            report: ReportInput, or a raw submission payload to normalize first

        Returns:
            ConfidenceResult with reasons and breakdown in registry order.
        """
        if not isinstance(report, ReportInput):
            report = normalize_report_payload(report)

        selected = self.registry.select(report)
        results = self._run_signals(report, selected)

        total = self.base_score + sum(result.score for result in results.values())
        reason = "; ".join(result.reason for result in results.values())
        evidence = [result.evidence for result in results.values() if result.has_source]

        breakdown: Dict[str, Any] = {
            name: results[name].score if name in results else 0
            for name in self.registry.names
        }
        # Round half up, then clamp into [0, 100]
        final_score = max(0, min(100, int(math.floor(total + 0.5))))
        breakdown["total"] = final_score

        logger.info(
            f"Confidence score {final_score} for report at {report.location_name} "
            f"({len(results)} signals)"
        )
        return ConfidenceResult(
            score=final_score,
            reason=reason,
            evidence=evidence,
            breakdown=breakdown,
        )

    def _run_signals(
        self, report: ReportInput, selected: List[SignalEvaluator]
    ) -> Dict[str, SignalResult]:
        """Evaluate signals concurrently and return results in registry order."""
        if not selected:
            return {}

        executor = ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(selected)),
            thread_name_prefix="crowdcred-signal",
        )
        try:
            futures: Dict[str, Future] = {
                evaluator.name: executor.submit(evaluator.evaluate, report)
                for evaluator in selected
            }
            wait(futures.values(), timeout=self.evaluator_timeout)

            results: Dict[str, SignalResult] = {}
            for evaluator in selected:
                future = futures[evaluator.name]
                if not future.done():
                    future.cancel()
                    logger.warning(
                        f"{evaluator.name} timed out after {self.evaluator_timeout}s"
                    )
                    results[evaluator.name] = evaluator.fallback(
                        f"timed out after {self.evaluator_timeout}s"
                    )
                    continue
                try:
                    results[evaluator.name] = future.result()
                except Exception as e:
                    logger.error(f"{evaluator.name} crashed: {e}")
                    results[evaluator.name] = evaluator.fallback(e)
            return results
        finally:
            # Don't block on stragglers; their results are already replaced
            executor.shutdown(wait=False, cancel_futures=True)
