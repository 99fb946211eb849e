"""FastAPI dependencies that build the deploy collaborators from settings.

Each HTTP client lives for one request. Tests replace these through
`app.dependency_overrides`.
"""

import asyncio
from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
from fastapi import Depends

from slug_processor.consul.client import ConsulClient
from slug_processor.core.config import Settings, get_settings
from slug_processor.deploy.service import Cloner
from slug_processor.nomad.client import NomadClient
from slug_processor.sandbox.checkout import clone_slug

_JSON_HEADERS = {"Content-Type": "application/json"}


async def get_consul_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[ConsulClient, None]:
    async with httpx.AsyncClient(
        base_url=settings.consul_addr,
        timeout=settings.http_timeout_seconds,
        headers=_JSON_HEADERS,
    ) as http:
        yield ConsulClient(http)


async def get_nomad_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[NomadClient, None]:
    async with httpx.AsyncClient(
        base_url=settings.nomad_addr,
        timeout=settings.http_timeout_seconds,
        headers=_JSON_HEADERS,
    ) as http:
        yield NomadClient(http)


def get_cloner(settings: Settings = Depends(get_settings)) -> Cloner:
    """Return an async cloner that runs `git clone` off the event loop."""
    repos_dir = Path(settings.repos_dir)

    async def clone(slug: str) -> Path:
        return await asyncio.to_thread(
            clone_slug,
            slug,
            repos_dir,
            base_url=settings.github_base_url,
            timeout=settings.clone_timeout_seconds,
        )

    return clone
