# src/crowdcred/__init__.py

"""
CrowdCred
Real-time credibility scoring for crowdsourced incident reports.
"""

__version__ = "0.1.0"
__author__ = "CrowdCred Development Team"

# No direct exports from root; subpackages are accessed explicitly
# e.g., from crowdcred.core import ConfidencePipeline
