# src/crowdcred/credibility/sources.py

from typing import Iterable, Tuple

# Publishers whose coverage earns the news quality bonus.
# Matched as case-sensitive substrings of the publisher name.
RECOGNIZED_NEWS_OUTLETS: Tuple[str, ...] = (
    "Times",  # Times of India, Hindustan Times, Economic Times
    "Hindu",  # The Hindu, Hindu BusinessLine
    "Express",  # Indian Express, Financial Express
    "TOI",
)

# URL fragments that mark a search hit as an official/authority source
OFFICIAL_URL_MARKERS: Tuple[str, ...] = (
    "gov.",
    "police",
    "municipal",
    "traffic",
)

# Place-name fragments that put a location in a road/traffic context
TRAFFIC_PLACE_MARKERS: Tuple[str, ...] = (
    "road",
    "highway",
    "junction",
    "signal",
)

# Words in a search hit that suggest the event is current
TRENDING_MARKERS: Tuple[str, ...] = (
    "today",
    "now",
    "breaking",
    "latest",
)


def contains_any(text: str, markers: Iterable[str]) -> bool:
    """
    Check whether any marker occurs in text as a plain substring.

    Args:
        text: Text to search (callers lower-case it where matching is case-insensitive)
        markers: Substrings to look for

    Returns:
        True if at least one marker is present.
    """
    return any(marker in text for marker in markers)


def is_recognized_outlet(publisher: str) -> bool:
    return bool(publisher) and contains_any(publisher, RECOGNIZED_NEWS_OUTLETS)


def is_official_url(url: str) -> bool:
    return bool(url) and contains_any(url, OFFICIAL_URL_MARKERS)
