# src/crowdcred/credibility/signals/image.py

import logging
import os

from crowdcred.credibility.signals.base import SignalEvaluator
from crowdcred.normalize.hash_utils import compute_sha256_from_file
from crowdcred.normalize.schema import ReportInput, SignalResult

logger = logging.getLogger(__name__)

MIN_PLAUSIBLE_SIZE_KB = 100
MAX_PLAUSIBLE_SIZE_KB = 5000


class ImageEvaluator(SignalEvaluator):
    """
    Basic authenticity checks on the photo attached to a report.

    Only runs for reports that carry a photo. Metadata validation is not
    wired in yet; its share of the score is granted as a fixed placeholder.
    """

    name = "image_authenticity"
    max_score = 15
    fallback_score = 0
    fallback_reason = "Image verification failed"
    evidence_source = "Image Analysis"

    metadata_placeholder = 3

    def applies_to(self, report: ReportInput) -> bool:
        return report.has_photo

    def _evaluate(self, report: ReportInput) -> SignalResult:
        photo_path = report.photo_path
        if not photo_path or not os.path.exists(photo_path):
            logger.warning(f"Photo not accessible: {photo_path}")
            return SignalResult(score=0, reason="Image not accessible", evidence={})

        score = 8  # Base score for having an image

        # Very small or very large uploads are suspicious
        file_size_kb = os.path.getsize(photo_path) / 1024
        if MIN_PLAUSIBLE_SIZE_KB < file_size_kb < MAX_PLAUSIBLE_SIZE_KB:
            score += 4
        else:
            score += 1

        score += self.metadata_placeholder

        return SignalResult(
            score=min(self.max_score, score),
            reason="Image validation: File appears authentic",
            evidence={
                "source": self.evidence_source,
                "file_size_kb": round(file_size_kb),
                "file_exists": True,
                "sha256": compute_sha256_from_file(photo_path),
            },
        )
