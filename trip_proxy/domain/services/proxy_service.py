from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Protocol

from trip_proxy.ai.payload_builder import UpstreamCallSpec, build, resolve_kind
from trip_proxy.ai.response_normalizer import normalize
from trip_proxy.core.config import Settings
from trip_proxy.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class UpstreamInvoker(Protocol):
    async def invoke(self, spec: UpstreamCallSpec) -> Dict[str, Any]: ...


class ProxyService:
    def __init__(self, settings: Settings, invoker: UpstreamInvoker):
        self.settings = settings
        self.invoker = invoker

    async def handle(self, request_body: Any) -> Any:
        """
        Dispatch one inbound request: configuration check, build, single upstream call, normalize.
        Every failure is an APIError raised before or instead of a partial result.
        """
        if not self.settings.gemini_api_key:
            logger.error("GEMINI_API_KEY is not set; rejecting request")
            raise ConfigurationError()

        fields: Mapping[str, Any] = request_body if isinstance(request_body, Mapping) else {}
        kind = resolve_kind(fields.get("type"))
        body = {key: value for key, value in fields.items() if key != "type"}

        spec = build(kind, body, self.settings)
        logger.info("Forwarding '%s' request to %s", kind.value, spec.endpoint_url)
        raw = await self.invoker.invoke(spec)
        return normalize(kind, raw, strict=self.settings.strict_itinerary_validation)
