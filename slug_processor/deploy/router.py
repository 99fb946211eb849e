"""Deploy endpoints.

POST /deploy runs the pipeline for a batch of slugs; GET /apps lists the
configs persisted in Consul. Request-level failures answer with
`{"error": <message>}`; per-slug failures are part of a 200 response.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from slug_processor.consul.client import ConsulClient
from slug_processor.deploy.dependencies import get_cloner, get_consul_client, get_nomad_client
from slug_processor.deploy.schemas import AppListResponse, DeployResponse, ErrorResponse
from slug_processor.deploy.service import Cloner, InvalidSlugsError, deploy_batch
from slug_processor.nomad.client import NomadClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["deploy"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/deploy",
    response_model=DeployResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def deploy(
    payload: Any = Body(default=None),
    consul: ConsulClient = Depends(get_consul_client),
    nomad: NomadClient = Depends(get_nomad_client),
    clone: Cloner = Depends(get_cloner),
):
    """Deploy a batch of `owner/repo` slugs.

    The body must be `{"slugs": [...]}`. Each slug is cloned, analyzed,
    persisted and dispatched in order; one failing slug does not stop the rest.
    """
    slugs = payload.get("slugs") if isinstance(payload, dict) else None
    try:
        results = await deploy_batch(slugs, consul=consul, nomad=nomad, clone=clone)
        return DeployResponse(results=results)
    except InvalidSlugsError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except Exception as exc:
        logger.exception("Deployment error")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


@router.get(
    "/apps",
    response_model=AppListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_apps(consul: ConsulClient = Depends(get_consul_client)):
    """Return every deployed app config stored under the Consul apps/ prefix."""
    try:
        apps = await consul.list_apps()
    except Exception as exc:
        logger.error("Failed to list apps from Consul: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    return AppListResponse(apps=apps)
