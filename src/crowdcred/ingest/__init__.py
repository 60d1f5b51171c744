# src/crowdcred/ingest/__init__.py

"""
Upstream verification sources for CrowdCred.
Exposes the source interface, the SerpApi provider and the canned/mock source.
"""

from .base import SourceUnavailableError, VerificationSource
from .serpapi import SerpApiSource
from .static import StaticVerificationSource

__all__ = [
    "SourceUnavailableError",
    "VerificationSource",
    "SerpApiSource",
    "StaticVerificationSource",
]
