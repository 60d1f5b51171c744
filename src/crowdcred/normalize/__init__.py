# src/crowdcred/normalize/__init__.py

"""
Normalization layer for CrowdCred.
Converts raw report payloads and upstream search responses into typed models.
"""

from .schema import (
    ConfidenceResult,
    IncidentCategory,
    NewsArticle,
    Place,
    ReportInput,
    ReportStatus,
    SignalResult,
    WebResult,
)
from .hash_utils import compute_sha256_from_file
from .transformer import extract_keywords, normalize_report_payload

__all__ = [
    "ConfidenceResult",
    "IncidentCategory",
    "NewsArticle",
    "Place",
    "ReportInput",
    "ReportStatus",
    "SignalResult",
    "WebResult",
    "compute_sha256_from_file",
    "extract_keywords",
    "normalize_report_payload",
]
