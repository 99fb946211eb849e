"""Deploy service: runs the per-slug pipeline over a batch.

Stage machine per slug:
    pending -> cloning -> analyzing -> configuring -> persisting -> dispatching -> done
    (any stage from cloning onwards) -> failed

Slugs are processed strictly one after another. An exception in any stage
ends that slug in `failed` with the exception's message; the next slug starts
from `pending` with no state carried over. Both terminal stages produce a
result, so the output always has one entry per input slug.

Collaborators (Consul, Nomad, the cloner) are passed in explicitly so the
router and tests decide what they are.
"""

from enum import StrEnum
from pathlib import Path
from typing import Any, Awaitable, Callable

import structlog

from slug_processor.consul.client import ConsulClient
from slug_processor.deploy.config import build_deployment_config
from slug_processor.deploy.naming import sanitize_app_name
from slug_processor.deploy.schemas import DeployFailure, DeployResult, DeploySuccess
from slug_processor.detector import analyze_repository, detect_app_type
from slug_processor.nomad.client import NomadClient

logger = structlog.get_logger(__name__)

Cloner = Callable[[str], Awaitable[Path]]

INVALID_SLUGS_MESSAGE = "slugs must be an array"


class InvalidSlugsError(ValueError):
    """Raised when the batch input is not a list of slugs."""


class DeployStage(StrEnum):
    PENDING = "pending"
    CLONING = "cloning"
    ANALYZING = "analyzing"
    CONFIGURING = "configuring"
    PERSISTING = "persisting"
    DISPATCHING = "dispatching"
    DONE = "done"
    FAILED = "failed"


def app_url(app_name: str) -> str:
    return f"http://{app_name}.localhost"


async def deploy_batch(
    slugs: Any,
    *,
    consul: ConsulClient,
    nomad: NomadClient,
    clone: Cloner,
) -> list[DeployResult]:
    """Deploy every slug in order and return one result per slug.

    Raises:
        InvalidSlugsError: If `slugs` is not a list. Nothing is processed.
    """
    if not isinstance(slugs, list):
        raise InvalidSlugsError(INVALID_SLUGS_MESSAGE)

    results: list[DeployResult] = []
    for slug in slugs:
        results.append(await deploy_slug(slug, consul=consul, nomad=nomad, clone=clone))

    deployed = sum(1 for r in results if isinstance(r, DeploySuccess))
    logger.info("batch complete", total=len(results), deployed=deployed)
    return results


async def deploy_slug(
    slug: Any,
    *,
    consul: ConsulClient,
    nomad: NomadClient,
    clone: Cloner,
) -> DeployResult:
    """Run the full pipeline for one slug. Never raises for per-slug errors."""
    log = logger.bind(slug=slug)
    stage = DeployStage.PENDING
    log.info("processing repository")

    try:
        stage = DeployStage.CLONING
        repo_dir = await clone(slug)

        stage = DeployStage.ANALYZING
        analysis = analyze_repository(repo_dir)
        app_type = detect_app_type(repo_dir)

        stage = DeployStage.CONFIGURING
        app_name = sanitize_app_name(slug)
        config = build_deployment_config(slug, app_name, app_type, analysis)

        stage = DeployStage.PERSISTING
        await consul.put_config(config)

        stage = DeployStage.DISPATCHING
        job_id = await nomad.dispatch(config)
    except Exception as exc:
        log.error("deploy failed", stage=str(stage), error=str(exc))
        return DeployFailure(slug=slug, error=str(exc))

    log.info("deployed", stage=str(DeployStage.DONE), app_name=app_name, job_id=job_id)
    return DeploySuccess(
        slug=slug,
        appName=app_name,
        jobId=job_id,
        url=app_url(app_name),
    )
