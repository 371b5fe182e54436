from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Tuple

from trip_proxy.ai import prompts
from trip_proxy.api.models.schemas import RequestKind, RequestKindInfo
from trip_proxy.core.config import Settings
from trip_proxy.core.errors import InvalidRequestKindError

logger = logging.getLogger(__name__)

GENERATE_CONTENT = "generateContent"
PREDICT = "predict"


@dataclass(frozen=True)
class UpstreamCallSpec:
    kind: RequestKind
    endpoint_url: str
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict, repr=False)
    method: str = "POST"


# (prompt, fields the template needed but did not get)
Rendered = Tuple[str, List[str]]


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ", ".join(_text(item) for item in value)
    return str(value)


def _field(source: Mapping[str, Any], key: str, missing: List[str]) -> str:
    value = source.get(key)
    if value is None or value == "":
        missing.append(key)
    return _text(value)


def _data(body: Mapping[str, Any]) -> Mapping[str, Any]:
    data = body.get("data")
    return data if isinstance(data, Mapping) else {}


def _text_contents(prompt: str) -> List[Dict[str, Any]]:
    return [{"parts": [{"text": prompt}]}]


# ---------- per-kind prompt renderers ----------


def _itinerary_prompt(body: Mapping[str, Any]) -> Rendered:
    data = _data(body)
    missing: List[str] = []
    prompt = prompts.ITINERARY_PROMPT.format(
        cities=_field(data, "cities", missing),
        country=_field(data, "country", missing),
        staying_at=_text(data.get("staying-at")) or prompts.DEFAULT_STAYING_AT,
        duration=_field(data, "duration", missing),
        num_people=_field(data, "num-people", missing),
        budget=_field(data, "budget", missing),
        trip_pace=_field(data, "trip-pace", missing),
        accommodation_type=_field(data, "accommodation-type", missing),
        interests=_text(data.get("interests")) or prompts.DEFAULT_INTERESTS,
    )
    return prompt, missing


def _grounded_search_prompt(body: Mapping[str, Any]) -> Rendered:
    missing: List[str] = []
    return _field(body, "query", missing), missing


def _contextual_qa_prompt(body: Mapping[str, Any]) -> Rendered:
    missing: List[str] = []
    prompt = prompts.CONTEXTUAL_QA_PROMPT.format(
        context=_field(body, "context", missing),
        question=_field(body, "question", missing),
    )
    return prompt, missing


def _flights_prompt(body: Mapping[str, Any]) -> Rendered:
    data = _data(body)
    missing: List[str] = []
    return_date = _text(data.get("flight-return-date"))
    prompt = prompts.FLIGHTS_PROMPT.format(
        origin=_field(data, "flight-origin", missing),
        destination=_field(data, "flight-destination", missing),
        depart_date=_field(data, "flight-depart-date", missing),
        return_clause=prompts.FLIGHTS_RETURN_CLAUSE.format(return_date=return_date) if return_date else "",
        travelers=_field(data, "flight-travelers", missing),
        cabin=_field(data, "flight-cabin", missing),
    )
    return prompt, missing


def _packing_list_prompt(body: Mapping[str, Any]) -> Rendered:
    data = _data(body)
    missing: List[str] = []
    prompt = prompts.PACKING_LIST_PROMPT.format(
        destination=_field(data, "pack-destination", missing),
        duration=_field(data, "pack-duration", missing),
        season=_field(data, "pack-season", missing),
        activities=_field(data, "pack-activities", missing),
    )
    return prompt, missing


def _currency_prompt(body: Mapping[str, Any]) -> Rendered:
    missing: List[str] = []
    prompt = prompts.CURRENCY_PROMPT.format(
        amount=_field(body, "amount", missing),
        from_currency=_field(body, "from", missing),
        to_currency=_field(body, "to", missing),
    )
    return prompt, missing


def _image_prompt(body: Mapping[str, Any]) -> Rendered:
    missing: List[str] = []
    return prompts.IMAGE_PROMPT.format(prompt=_field(body, "prompt", missing)), missing


# ---------- per-kind upstream bodies ----------


def _itinerary_body(prompt: str, settings: Settings) -> Dict[str, Any]:
    return {
        "contents": _text_contents(prompt),
        "generationConfig": {
            "temperature": settings.itinerary_temperature,
            "responseMimeType": "application/json",
            "responseSchema": prompts.itinerary_response_schema(),
        },
    }


def _grounded_body(prompt: str, settings: Settings) -> Dict[str, Any]:
    return {"contents": _text_contents(prompt), "tools": [{"google_search": {}}]}


def _plain_body(prompt: str, settings: Settings) -> Dict[str, Any]:
    return {"contents": _text_contents(prompt)}


def _image_body(prompt: str, settings: Settings) -> Dict[str, Any]:
    return {"instances": [{"prompt": prompt}], "parameters": {"sampleCount": 1}}


@dataclass(frozen=True)
class KindRoute:
    render: Callable[[Mapping[str, Any]], Rendered]
    make_body: Callable[[str, Settings], Dict[str, Any]]
    action: str = GENERATE_CONTENT
    grounded: bool = False

    def model(self, settings: Settings) -> str:
        return settings.gemini_image_model if self.action == PREDICT else settings.gemini_text_model


ROUTES: Dict[RequestKind, KindRoute] = {
    RequestKind.ITINERARY: KindRoute(_itinerary_prompt, _itinerary_body),
    RequestKind.GROUNDED_SEARCH: KindRoute(_grounded_search_prompt, _grounded_body, grounded=True),
    RequestKind.CONTEXTUAL_QA: KindRoute(_contextual_qa_prompt, _grounded_body, grounded=True),
    RequestKind.FLIGHTS: KindRoute(_flights_prompt, _grounded_body, grounded=True),
    RequestKind.PACKING_LIST: KindRoute(_packing_list_prompt, _plain_body),
    RequestKind.CURRENCY: KindRoute(_currency_prompt, _grounded_body, grounded=True),
    RequestKind.GENERATE_IMAGE: KindRoute(_image_prompt, _image_body, action=PREDICT),
}

_unrouted = set(RequestKind) - set(ROUTES)
if _unrouted:
    raise RuntimeError(f"No upstream route for request kinds: {sorted(kind.value for kind in _unrouted)}")


def resolve_kind(value: Any) -> RequestKind:
    kind = value if isinstance(value, RequestKind) else RequestKind.parse(value)
    if kind is None:
        raise InvalidRequestKindError(kind=value)
    return kind


def endpoint_url(settings: Settings, model: str, action: str) -> str:
    return f"{settings.gemini_api_base_url.rstrip('/')}/models/{model}:{action}"


def build(kind: RequestKind | str, body: Mapping[str, Any], settings: Settings) -> UpstreamCallSpec:
    """
    Build the single upstream call for a request kind.
    Pure: no network access, and identical input yields an equal spec.
    """
    kind = resolve_kind(kind)
    route = ROUTES[kind]
    prompt, missing = route.render(body or {})
    if missing:
        logger.warning("Request '%s' is missing fields %s; interpolating empty text", kind.value, missing)

    return UpstreamCallSpec(
        kind=kind,
        endpoint_url=endpoint_url(settings, route.model(settings), route.action),
        headers={"Content-Type": "application/json", "x-goog-api-key": settings.gemini_api_key},
        body=route.make_body(prompt, settings),
    )


def describe_kinds(settings: Settings) -> List[RequestKindInfo]:
    return [
        RequestKindInfo(type=kind, model=route.model(settings), action=route.action, grounded=route.grounded)
        for kind, route in ROUTES.items()
    ]
