# src/crowdcred/credibility/__init__.py

"""
Confidence scoring for CrowdCred.
Runs verification signals over an incident report and combines them into a 0-100 score.
"""

from .registry import SignalRegistry
from .reputation import ReputationProvider, StaticReputationProvider
from .scorer import ConfidenceScorer, default_result
from .status import classify_status

__all__ = [
    "SignalRegistry",
    "ReputationProvider",
    "StaticReputationProvider",
    "ConfidenceScorer",
    "default_result",
    "classify_status",
]
