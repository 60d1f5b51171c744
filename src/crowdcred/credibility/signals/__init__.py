# src/crowdcred/credibility/signals/__init__.py

"""
Verification signals for CrowdCred.
Each evaluator scores one slice of a report against one upstream source.
"""

from .base import SignalEvaluator
from .news import NewsEvaluator
from .search import SearchEvaluator
from .location import LocationEvaluator
from .image import ImageEvaluator
from .trend import TrendEvaluator
from .reputation import ReputationEvaluator

__all__ = [
    "SignalEvaluator",
    "NewsEvaluator",
    "SearchEvaluator",
    "LocationEvaluator",
    "ImageEvaluator",
    "TrendEvaluator",
    "ReputationEvaluator",
]
