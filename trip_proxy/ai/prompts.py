"""Prompt templates and the structured-output schema sent to the text model."""

ITINERARY_PROMPT = """
You are an AI travel assistant. Your task is to generate a travel itinerary based on the user's request.
You MUST format your response *strictly* according to the provided JSON schema.
Do not add any text, conversational chat, or markdown outside of the final JSON structure.

User Request:
- Destination: {cities}, {country}
- Staying At (Starting Point): {staying_at}
- Duration: {duration} days
- Travelers: {num_people}
- Budget: {budget}
- Pace: {trip_pace}
- Accommodation: {accommodation_type}
- Interests: {interests}

IMPORTANT INSTRUCTIONS:
1.  If "Staying At" is specific (not 'Central location'), you MUST assume the user starts their day there.
    Optimise the daily order of activities to minimize travel time from that starting point.
2.  **PERSONAL TOUCH:** For each day, provide one or two specific suggestions for lunch and dinner as a `foodSuggestion`.
    These should be relevant to the day's activities and location (e.g., "For dinner, try the famous biryani at Saravana Bhavan near the temple.").

JSON Schema Instructions:
1.  **title**: Generate a concise, catchy title for the trip (e.g., "3-Day Foodie Tour of Rome").
2.  **summary**: Write a 2-3 sentence summary of the trip.
3.  **budgetTier**: Use the user's requested budget (e.g., "{budget}").
4.  **numberOfPeople**: Use the user's requested number (e.g., {num_people}).
5.  **costPerHeadUSD**: Estimate a reasonable cost per person in USD (number only).
6.  **bestSeasonToVisit**: Suggest the best season to visit (e.g., "Spring (April-June)").
7.  **days**: Create an array for each day.
8.  **day object**: Each day *must* have a "day" number, "theme", "city", "transportation_tip", "foodSuggestion", and an "activities" array.
9.  **activity object**: Each activity *must* have a "name", "type", "details", "address", "approxCostUSD", and "crowdLevel" (Low, Moderate, or High).

IMPORTANT: Your entire response must be ONLY the JSON object, starting with {{ and ending with }}.
"""

DEFAULT_STAYING_AT = "Central location"
DEFAULT_INTERESTS = "N/A"

CONTEXTUAL_QA_PROMPT = (
    'Regarding the travel activity or location "{context}", please provide a concise and helpful '
    'answer to the following user question: "{question}"'
)

FLIGHTS_PROMPT = (
    "Find the cheapest flight options from {origin} to {destination}, departing on {depart_date}"
    "{return_clause} for {travelers} traveler(s) in {cabin} class. Summarize the best 2-3 options. "
    "IMPORTANT: Make sure all airline names are enclosed in asterisks to make them bold, "
    "for example **IndiGo** or **SriLankan Airlines**."
)
FLIGHTS_RETURN_CLAUSE = " and returning on {return_date}"

PACKING_LIST_PROMPT = (
    "Generate a detailed packing list for a trip to {destination} for {duration} days, during the {season}. "
    "Special activities include: {activities}. Format the output as a Markdown list."
)

CURRENCY_PROMPT = (
    "What is the current exchange rate for {amount} {from_currency} to {to_currency}? "
    "Just give the final converted number and the currency code."
)

IMAGE_PROMPT = "A beautiful, high-quality, professional photograph of: {prompt}. Realistic, 16:9 aspect ratio."

ITINERARY_REQUIRED_FIELDS = [
    "title",
    "numberOfPeople",
    "budgetTier",
    "costPerHeadUSD",
    "summary",
    "bestSeasonToVisit",
    "days",
]
DAY_REQUIRED_FIELDS = ["day", "theme", "city", "activities", "transportation_tip", "foodSuggestion"]
ACTIVITY_REQUIRED_FIELDS = ["name", "type", "details", "approxCostUSD", "crowdLevel", "address"]


def itinerary_response_schema() -> dict:
    """Gemini responseSchema (OpenAPI subset) mirroring the itinerary models. Built fresh on every call."""
    activity = {
        "type": "OBJECT",
        "properties": {
            "name": {"type": "STRING"},
            "type": {"type": "STRING"},
            "crowdLevel": {"type": "STRING", "enum": ["Low", "Moderate", "High"]},
            "approxCostUSD": {"type": "NUMBER"},
            "details": {"type": "STRING"},
            "address": {"type": "STRING"},
        },
        "required": list(ACTIVITY_REQUIRED_FIELDS),
    }
    day = {
        "type": "OBJECT",
        "properties": {
            "day": {"type": "NUMBER"},
            "theme": {"type": "STRING"},
            "city": {"type": "STRING"},
            "transportation_tip": {"type": "STRING"},
            "foodSuggestion": {"type": "STRING"},
            "activities": {"type": "ARRAY", "items": activity},
        },
        "required": list(DAY_REQUIRED_FIELDS),
    }
    return {
        "type": "OBJECT",
        "properties": {
            "title": {"type": "STRING"},
            "numberOfPeople": {"type": "NUMBER"},
            "budgetTier": {"type": "STRING"},
            "costPerHeadUSD": {"type": "NUMBER"},
            "summary": {"type": "STRING"},
            "bestSeasonToVisit": {"type": "STRING"},
            "days": {"type": "ARRAY", "items": day},
        },
        "required": list(ITINERARY_REQUIRED_FIELDS),
    }
