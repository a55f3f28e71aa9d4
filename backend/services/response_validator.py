import json
import logging
from typing import Any

from models.results import ErrorKind, Failure

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def validate(raw_text: str) -> Any | Failure:
    """Parse the model's reply as strict JSON, exactly as returned.

    NaN and Infinity are rejected. The skillGaps/atsScore shape is not
    checked; any well-formed JSON passes.
    """
    try:
        parsed = json.loads(raw_text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        logger.error("Failed to parse AI response as JSON: %s. Response: %s", e, raw_text)
        return Failure(
            ErrorKind.MALFORMED_RESPONSE,
            "Invalid JSON response from AI service",
            detail=raw_text,
        )
    logger.info("Successfully parsed AI response as JSON")
    return parsed
