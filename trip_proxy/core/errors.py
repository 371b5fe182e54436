from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class APIError(HTTPException):
    def __init__(self, status_code: int, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.message = message


class MethodNotAllowedError(APIError):
    def __init__(self, message: str = "Method Not Allowed"):
        super().__init__(status.HTTP_405_METHOD_NOT_ALLOWED, message, headers={"Allow": "POST"})


class ConfigurationError(APIError):
    def __init__(self, message: str = "API key is not configured on the server."):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


class InvalidRequestKindError(APIError):
    def __init__(self, kind: Any = None, message: str = "Invalid API request type"):
        super().__init__(status.HTTP_400_BAD_REQUEST, message)
        self.kind = kind


class UpstreamError(APIError):
    def __init__(self, message: str = "Failed to fetch from API", status_code: Optional[int] = None):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
        self.upstream_status = status_code


class GenerationFailedError(APIError):
    def __init__(self, message: str = "No image was generated."):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


class MalformedItineraryError(APIError):
    """Model output could not be read as an itinerary. `raw_text` is for server logs only."""

    def __init__(
        self,
        raw_text: Optional[str] = None,
        message: str = "The AI failed to generate a valid itinerary format. Please try again.",
    ):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
        self.raw_text = raw_text


def error_content(message: str) -> Dict[str, Any]:
    return {"error": message}
