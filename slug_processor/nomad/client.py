"""Nomad client for dispatching parameterized deployment jobs.

Two job templates are registered on the cluster ahead of time:
  python-app: python apps (installs requirements, runs under PYTHON_VERSION)
  github-app: everything else (BUILD_COMMAND / START_COMMAND driven)

A deployment is one POST /v1/job/<template>/dispatch carrying the per-app
metadata. There is no retry and no polling for completion; scheduling and
execution belong to Nomad. httpx errors propagate unchanged.
"""

import logging

import httpx

from slug_processor.deploy.config import DeploymentConfig
from slug_processor.detector.types import AppType

logger = logging.getLogger(__name__)

PYTHON_TEMPLATE = "python-app"
DEFAULT_TEMPLATE = "github-app"


def select_job_template(app_type: AppType) -> str:
    return PYTHON_TEMPLATE if app_type == AppType.PYTHON else DEFAULT_TEMPLATE


def build_dispatch_meta(config: DeploymentConfig) -> dict[str, str]:
    """Build the dispatch Meta map for a deployment config.

    Optional keys are only present when the source field is set, and only
    for the app type whose template reads them.
    """
    meta = {
        "GITHUB_SLUG": config.slug,
        "APP_NAME": config.app_name,
        "PORT": str(config.port),
    }
    if config.app_type == AppType.PYTHON and config.python_version:
        meta["PYTHON_VERSION"] = config.python_version
    if config.app_type == AppType.NODE:
        if config.build_cmd:
            meta["BUILD_COMMAND"] = config.build_cmd
        if config.start_cmd:
            meta["START_COMMAND"] = config.start_cmd
    return meta


class NomadClient:
    """Dispatches deployment jobs through an injected httpx.AsyncClient."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def dispatch(self, config: DeploymentConfig) -> str:
        """Dispatch the app's job template and return the DispatchedJobID."""
        template = select_job_template(config.app_type)
        meta = build_dispatch_meta(config)

        response = await self._http.post(
            f"/v1/job/{template}/dispatch",
            json={"Meta": meta},
        )
        response.raise_for_status()
        job_id = response.json()["DispatchedJobID"]

        logger.info("Dispatched %s for %s as %s", template, config.app_name, job_id)
        return job_id
