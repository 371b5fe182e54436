import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from trip_proxy.api.routers import meta, proxy
from trip_proxy.core.config import settings
from trip_proxy.core.errors import APIError, error_content
from trip_proxy.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.project_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(proxy.router, prefix=settings.proxy_prefix)
app.include_router(meta.router, prefix=settings.proxy_prefix)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, APIError):
        return JSONResponse(status_code=exc.status_code, content=error_content(exc.message), headers=exc.headers)
    return JSONResponse(status_code=exc.status_code, content=error_content(str(exc.detail)), headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("Internal Server Error"),
    )
