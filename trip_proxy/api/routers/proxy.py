import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from trip_proxy.core.errors import MethodNotAllowedError
from trip_proxy.dependencies import get_proxy_service
from trip_proxy.domain.services.proxy_service import ProxyService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["proxy"])


async def _read_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        logger.info("Ignoring non-JSON request body")
        return {}


@router.post("/proxy")
async def proxy(request: Request, svc: ProxyService = Depends(get_proxy_service)):
    body = await _read_body(request)
    return await svc.handle(body)


@router.api_route("/proxy", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def proxy_method_not_allowed():
    raise MethodNotAllowedError()
