"""Shared test fixtures for the slug processor test suite.

Consul, Nomad and git are replaced with in-process fakes. The fake cloner
materialises a repository from a {filename: content} mapping into tmp_path,
so the real detector and analyzer run against real files.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from slug_processor.core.config import Settings, get_settings
from slug_processor.deploy.config import DeploymentConfig
from slug_processor.deploy.dependencies import get_cloner, get_consul_client, get_nomad_client
from slug_processor.main import create_app
from slug_processor.nomad.client import select_job_template


class FakeConsul:
    """In-memory stand-in for ConsulClient."""

    def __init__(self) -> None:
        self.stored: dict[str, dict] = {}
        self.put_error: Exception | None = None
        self.list_error: Exception | None = None

    async def put_config(self, config: DeploymentConfig) -> None:
        if self.put_error:
            raise self.put_error
        self.stored[config.app_name] = config.to_dict()

    async def list_apps(self) -> list[dict]:
        if self.list_error:
            raise self.list_error
        return [{"name": name, **config} for name, config in self.stored.items()]


class FakeNomad:
    """Records dispatched configs and hands out sequential job IDs."""

    def __init__(self) -> None:
        self.dispatched: list[DeploymentConfig] = []
        self.dispatch_error: Exception | None = None

    async def dispatch(self, config: DeploymentConfig) -> str:
        if self.dispatch_error:
            raise self.dispatch_error
        self.dispatched.append(config)
        return f"{select_job_template(config.app_type)}/dispatch-{len(self.dispatched)}"


def write_repo(repo_dir: Path, files: dict[str, str]) -> Path:
    repo_dir.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (repo_dir / name).write_text(content, encoding="utf-8")
    return repo_dir


@pytest.fixture
def fake_consul() -> FakeConsul:
    return FakeConsul()


@pytest.fixture
def fake_nomad() -> FakeNomad:
    return FakeNomad()


@pytest.fixture
def repo_files() -> dict[str, dict[str, str]]:
    """slug -> {filename: content}. Slugs not listed fail to clone."""
    return {}


@pytest.fixture
def fake_clone(tmp_path, repo_files):
    cloned: list[str] = []

    async def clone(slug: str) -> Path:
        cloned.append(slug)
        if slug not in repo_files:
            raise RuntimeError("Repository not found")
        return write_repo(tmp_path / "repos" / slug.replace("/", "_"), repo_files[slug])

    clone.cloned = cloned
    return clone


def _override_settings() -> Settings:
    return Settings(debug=False)


@pytest.fixture
def app(fake_consul, fake_nomad, fake_clone):
    """FastAPI app with settings and every external collaborator overridden."""
    test_app = create_app()
    test_app.dependency_overrides[get_settings] = _override_settings
    test_app.dependency_overrides[get_consul_client] = lambda: fake_consul
    test_app.dependency_overrides[get_nomad_client] = lambda: fake_nomad
    test_app.dependency_overrides[get_cloner] = lambda: fake_clone
    return test_app


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
