import json

import pytest

from trip_proxy.ai.response_normalizer import normalize
from trip_proxy.api.models.schemas import RequestKind
from trip_proxy.core.errors import GenerationFailedError, MalformedItineraryError


def _candidates(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


VALID_ITINERARY = {
    "title": "3-Day Art Walk in Paris",
    "numberOfPeople": 2,
    "budgetTier": "Medium",
    "costPerHeadUSD": 850,
    "summary": "Museums by day, bistros by night.",
    "bestSeasonToVisit": "Spring (April-June)",
    "days": [
        {
            "day": 1,
            "theme": "Left Bank",
            "city": "Paris",
            "transportation_tip": "Take Metro line 4.",
            "foodSuggestion": "Lunch at Café de Flore.",
            "activities": [
                {
                    "name": "Musée d'Orsay",
                    "type": "Museum",
                    "details": "Impressionist collection.",
                    "address": "1 Rue de la Légion d'Honneur",
                    "approxCostUSD": 18,
                    "crowdLevel": "High",
                }
            ],
        }
    ],
}


def test_itinerary_text_is_parsed():
    raw = _candidates('{"title":"X","days":[]}')

    assert normalize(RequestKind.ITINERARY, raw) == {"title": "X", "days": []}


def test_itinerary_not_json_is_malformed():
    with pytest.raises(MalformedItineraryError) as exc_info:
        normalize(RequestKind.ITINERARY, _candidates("not json"))

    err = exc_info.value
    assert err.status_code == 500
    assert err.raw_text == "not json"
    assert "not json" not in err.message


@pytest.mark.parametrize("raw", [{}, {"candidates": []}, {"candidates": [{"content": {"parts": []}}]}, []])
def test_itinerary_missing_candidate_is_malformed(raw):
    with pytest.raises(MalformedItineraryError):
        normalize(RequestKind.ITINERARY, raw)


def test_strict_mode_rejects_partial_itinerary():
    with pytest.raises(MalformedItineraryError):
        normalize(RequestKind.ITINERARY, _candidates('{"title":"X","days":[]}'), strict=True)


def test_strict_mode_accepts_full_itinerary():
    raw = _candidates(json.dumps(VALID_ITINERARY))

    assert normalize(RequestKind.ITINERARY, raw, strict=True) == VALID_ITINERARY


def test_strict_mode_rejects_unknown_crowd_level():
    broken = json.loads(json.dumps(VALID_ITINERARY))
    broken["days"][0]["activities"][0]["crowdLevel"] = "Packed"

    with pytest.raises(MalformedItineraryError):
        normalize(RequestKind.ITINERARY, _candidates(json.dumps(broken)), strict=True)


def test_image_prediction_is_extracted():
    raw = {"predictions": [{"bytesBase64Encoded": "aGVsbG8=", "mimeType": "image/png"}]}

    assert normalize(RequestKind.GENERATE_IMAGE, raw) == {"base64Image": "aGVsbG8="}


@pytest.mark.parametrize("raw", [{"predictions": []}, {}, {"predictions": None}])
def test_image_without_predictions_fails(raw):
    with pytest.raises(GenerationFailedError) as exc_info:
        normalize(RequestKind.GENERATE_IMAGE, raw)
    assert exc_info.value.message == "No image was generated."


@pytest.mark.parametrize(
    "kind",
    [
        RequestKind.GROUNDED_SEARCH,
        RequestKind.CONTEXTUAL_QA,
        RequestKind.FLIGHTS,
        RequestKind.PACKING_LIST,
        RequestKind.CURRENCY,
    ],
)
def test_text_kinds_pass_through(kind):
    raw = _candidates("**IndiGo** from $120")
    raw["usageMetadata"] = {"totalTokenCount": 42}

    assert normalize(kind, raw) is raw


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_itinerary_with_non_finite_number_is_malformed(constant):
    text = '{"title":"X","costPerHeadUSD":%s,"days":[]}' % constant

    with pytest.raises(MalformedItineraryError) as exc_info:
        normalize(RequestKind.ITINERARY, _candidates(text))
    assert exc_info.value.raw_text == text


def test_strict_mode_accepts_fractional_numbers():
    itinerary = json.loads(json.dumps(VALID_ITINERARY))
    itinerary["numberOfPeople"] = 2.5
    itinerary["days"][0]["day"] = 1.5

    assert normalize(RequestKind.ITINERARY, _candidates(json.dumps(itinerary)), strict=True) == itinerary
