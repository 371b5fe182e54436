from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel

# ---------- Request kinds ----------


class RequestKind(str, Enum):
    ITINERARY = "itinerary"
    GROUNDED_SEARCH = "groundedSearch"
    CONTEXTUAL_QA = "contextualQa"
    FLIGHTS = "flights"
    PACKING_LIST = "packingList"
    CURRENCY = "currency"
    GENERATE_IMAGE = "generateImage"

    @classmethod
    def parse(cls, value: object) -> Optional["RequestKind"]:
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# ---------- Itinerary ----------


CrowdLevel = Literal["Low", "Moderate", "High"]


class ItineraryActivity(BaseModel):
    name: str
    type: str
    details: str
    address: str
    approxCostUSD: float
    crowdLevel: CrowdLevel


class ItineraryDay(BaseModel):
    day: float
    theme: str
    city: str
    transportation_tip: str
    foodSuggestion: Optional[str] = None
    activities: List[ItineraryActivity]


class Itinerary(BaseModel):
    title: str
    numberOfPeople: float
    budgetTier: str
    costPerHeadUSD: float
    summary: str
    bestSeasonToVisit: str
    days: List[ItineraryDay]


# ---------- Meta ----------


class RequestKindInfo(BaseModel):
    type: RequestKind
    model: str
    action: Literal["generateContent", "predict"]
    grounded: bool
