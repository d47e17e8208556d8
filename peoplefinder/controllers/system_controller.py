# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""System endpoints: health, readiness, metrics."""
from fastapi import APIRouter, Depends, HTTPException
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from peoplefinder.core.config import settings
from peoplefinder.core.dependencies import get_directory_client
from peoplefinder.core.errors import DirectoryRequestError
from peoplefinder.services.directory_client import DirectoryClient

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}


@router.get("/health/ready")
def readiness_check(client: DirectoryClient = Depends(get_directory_client)):
    try:
        client.verify_connection()
    except DirectoryRequestError as exc:
        raise HTTPException(status_code=503, detail=f"PeopleFinder unavailable: {exc}")
    return {"status": "ready", "directory": client.base_url}


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
