# src/crowdcred/normalize/transformer.py

import json
import logging
import re
from typing import Any, Dict, List, Mapping, Tuple, Union

from crowdcred.normalize.schema import IncidentCategory, ReportInput

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^\w\s]")

# Submission handlers send camelCase; internal callers use snake_case.
_FIELD_ALIASES = {
    "locationName": "location_name",
    "photoPath": "photo_path",
    "userId": "user_id",
}

_KNOWN_CATEGORIES = {c.value.lower() for c in IncidentCategory}


def extract_keywords(description: str, limit: int = 5) -> List[str]:
    """
    Pull the first few meaningful words out of a report description.

    Lower-cases the text, replaces punctuation with spaces and keeps words
    longer than three characters, in order of appearance.

    Examples:
        >>> extract_keywords("Multi-car pileup near Central Junction!")
        ['multi', 'pileup', 'near', 'central', 'junction']
    """
    words = _NON_WORD.sub(" ", description.lower()).split()
    return [word for word in words if len(word) > 3][:limit]


def parse_location(raw: Any) -> Tuple[float, float]:
    """
    Parse a coordinate into ``(longitude, latitude)``.

    Accepts a ``[lng, lat]`` sequence, a mapping with ``lng``/``lat`` (or
    ``longitude``/``latitude``) keys, or a JSON string encoding either.

    Raises:
        ValueError: If the value cannot be interpreted as a coordinate
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid location format: {e}") from e

    try:
        if isinstance(raw, Mapping):
            lng = raw.get("lng", raw.get("longitude"))
            lat = raw.get("lat", raw.get("latitude"))
            return float(lng), float(lat)
        if isinstance(raw, (list, tuple)) and len(raw) == 2:
            return float(raw[0]), float(raw[1])
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid location format: {raw!r}") from e

    raise ValueError(f"Invalid location format: {raw!r}")


def normalize_report_payload(payload: Union[Dict[str, Any], str]) -> ReportInput:
    """
    Normalize a raw report-submission payload into a ReportInput.

    Args:
        payload: Dict or JSON string as received from the submission handler

    Returns:
        Validated ReportInput.

    Raises:
        ValueError: If the payload or its location is malformed
        pydantic.ValidationError: If required fields are missing
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError(f"Report payload is not valid JSON: {e}") from e

    if not isinstance(payload, Mapping):
        raise ValueError("Report payload must be a JSON object")

    data = {_FIELD_ALIASES.get(key, key): value for key, value in payload.items()}
    if "location" in data:
        data["location"] = parse_location(data["location"])

    category = data.get("category")
    if isinstance(category, str) and category.lower() not in _KNOWN_CATEGORIES:
        logger.warning(f"Unknown incident category: {category}")

    return ReportInput.model_validate(data)
