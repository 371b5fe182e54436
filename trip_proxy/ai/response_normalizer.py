from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from trip_proxy.api.models.schemas import Itinerary, RequestKind
from trip_proxy.core.errors import GenerationFailedError, MalformedItineraryError
from trip_proxy.core.json_utils import loads_strict

logger = logging.getLogger(__name__)


def _candidate_text(raw: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text, or None when the response has another shape."""
    try:
        text = raw["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


def normalize_image(raw: Any) -> Dict[str, Any]:
    predictions = raw.get("predictions") if isinstance(raw, dict) else None
    if not isinstance(predictions, list) or not predictions:
        logger.warning("Image model returned no predictions")
        raise GenerationFailedError()
    first = predictions[0] if isinstance(predictions[0], dict) else {}
    return {"base64Image": first.get("bytesBase64Encoded")}


def normalize_itinerary(raw: Any, strict: bool = False) -> Any:
    text = _candidate_text(raw)
    if text is None:
        logger.error("Itinerary response had no candidate text: %s", raw)
        raise MalformedItineraryError(raw_text=None)

    try:
        parsed = loads_strict(text)
    except ValueError as exc:
        logger.error("Failed to parse itinerary JSON from model: %s", exc)
        logger.error("Original text from model: %s", text)
        raise MalformedItineraryError(raw_text=text) from exc

    if strict:
        try:
            Itinerary.model_validate(parsed)
        except PydanticValidationError as exc:
            logger.error("Itinerary JSON does not match the schema: %s", exc)
            logger.error("Original text from model: %s", text)
            raise MalformedItineraryError(raw_text=text) from exc
    return parsed


def normalize(kind: RequestKind, raw: Any, strict: bool = False) -> Any:
    """Map a raw upstream response to the result returned for `kind`."""
    if kind is RequestKind.GENERATE_IMAGE:
        return normalize_image(raw)
    if kind is RequestKind.ITINERARY:
        return normalize_itinerary(raw, strict=strict)
    return raw
