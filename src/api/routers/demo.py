# This file defines the plain-text demonstration routes: greeting, server status, and a forced error.
# The forced error goes through the global handlers so clients see the standard error body.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config
from src.api.error_handlers import APIError

router = APIRouter(tags=["demo"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("/hello", response_class=PlainTextResponse)
def hello() -> str:
    return "Hello World!"


@router.get("/status", response_class=PlainTextResponse)
def status(config: ConfigDep) -> str:
    return f"Server is running on port {config.port} in {config.environment} environment"


@router.get("/error")
def error() -> None:
    raise APIError(
        status_code=500,
        error_code="DEMO_ERROR",
        message="Something went wrong!",
    )
