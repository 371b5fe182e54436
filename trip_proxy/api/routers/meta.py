from typing import List

from fastapi import APIRouter, Depends

from trip_proxy.ai.payload_builder import describe_kinds
from trip_proxy.api.models.schemas import RequestKindInfo
from trip_proxy.core.config import Settings, get_settings

router = APIRouter(prefix="/meta", tags=["meta"])


@router.get("/request-kinds", response_model=List[RequestKindInfo])
async def list_request_kinds(settings: Settings = Depends(get_settings)):
    return describe_kinds(settings)
