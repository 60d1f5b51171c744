# src/crowdcred/core/__init__.py

"""
Core orchestration for CrowdCred.
Manages configuration and end-to-end confidence scoring.
"""

from .config import CrowdCredConfig, load_config
from .pipeline import ConfidencePipeline, calculate_confidence

__all__ = [
    "CrowdCredConfig",
    "load_config",
    "ConfidencePipeline",
    "calculate_confidence",
]
