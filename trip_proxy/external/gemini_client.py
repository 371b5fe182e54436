from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from trip_proxy.ai.payload_builder import UpstreamCallSpec
from trip_proxy.core.errors import UpstreamError
from trip_proxy.core.json_utils import loads_strict

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to fetch from API"


def _error_message(resp: httpx.Response) -> str:
    """Upstream error bodies look like {"error": {"code", "message", "status"}}."""
    try:
        data = resp.json()
    except ValueError:
        return GENERIC_FAILURE
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return GENERIC_FAILURE


class GeminiClient:
    """
    Google Generative Language API adapter.
    Sends exactly one request per spec: no retries, no caching.
    """

    def __init__(self, timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self._transport = transport

    async def invoke(self, spec: UpstreamCallSpec) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.request(spec.method, spec.endpoint_url, headers=spec.headers, json=spec.body)
        except httpx.HTTPError as exc:
            logger.error("Upstream call for '%s' failed: %s", spec.kind.value, exc)
            raise UpstreamError(str(exc) or GENERIC_FAILURE) from exc

        if resp.is_error:
            message = _error_message(resp)
            logger.error(
                "Upstream returned %s for '%s' (%s): %s",
                resp.status_code,
                spec.kind.value,
                spec.endpoint_url,
                message,
            )
            raise UpstreamError(message, status_code=resp.status_code)

        try:
            return loads_strict(resp.content)
        except ValueError as exc:
            logger.error("Upstream returned a non-JSON body for '%s': %s", spec.kind.value, exc)
            raise UpstreamError(str(exc)) from exc
