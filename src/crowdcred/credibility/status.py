# src/crowdcred/credibility/status.py

from crowdcred.normalize.schema import ReportStatus


def classify_status(
    score: int, verified_threshold: int = 70, unverified_threshold: int = 40
) -> ReportStatus:
    """
    Map a confidence score to the status a report is published with.

    Args:
        score: Confidence score (0-100)
        verified_threshold: Minimum score for VERIFIED
        unverified_threshold: Minimum score for UNVERIFIED; anything lower is REJECTED

    Returns:
        ReportStatus for the score.
    """
    if score >= verified_threshold:
        return ReportStatus.VERIFIED
    if score >= unverified_threshold:
        return ReportStatus.UNVERIFIED
    return ReportStatus.REJECTED
