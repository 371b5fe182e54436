from fastapi import Depends

from trip_proxy.core.config import Settings, get_settings
from trip_proxy.domain.services.proxy_service import ProxyService, UpstreamInvoker
from trip_proxy.external.gemini_client import GeminiClient


def get_invoker(settings: Settings = Depends(get_settings)) -> UpstreamInvoker:
    return GeminiClient(timeout=settings.upstream_timeout_seconds)


def get_proxy_service(
    settings: Settings = Depends(get_settings),
    invoker: UpstreamInvoker = Depends(get_invoker),
) -> ProxyService:
    return ProxyService(settings=settings, invoker=invoker)


__all__ = [
    "get_invoker",
    "get_proxy_service",
    "get_settings",
]
