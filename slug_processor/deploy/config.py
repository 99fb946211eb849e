"""Deployment config: detector output merged with app-type defaults."""

from dataclasses import dataclass
from typing import Optional

from slug_processor.detector.types import AppType, RepositoryAnalysis

DEFAULT_PYTHON_PORT = 5000
DEFAULT_PORT = 3000


@dataclass
class DeploymentConfig:
    """Canonical deployment descriptor persisted to Consul and sent to Nomad.

    `port` is always concrete; the remaining optional fields pass through
    from the analysis untouched.
    """

    slug: str
    app_name: str
    app_type: AppType
    port: int
    build_cmd: Optional[str] = None
    start_cmd: Optional[str] = None
    python_version: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialise with the camelCase keys the deploy jobs read from Consul."""
        return {
            "slug": self.slug,
            "appName": self.app_name,
            "appType": str(self.app_type),
            "port": self.port,
            "buildCmd": self.build_cmd,
            "startCmd": self.start_cmd,
            "pythonVersion": self.python_version,
        }


def resolve_port(app_type: AppType, detected: Optional[int]) -> int:
    if detected is not None:
        return detected
    return DEFAULT_PYTHON_PORT if app_type == AppType.PYTHON else DEFAULT_PORT


def build_deployment_config(
    slug: str,
    app_name: str,
    app_type: AppType,
    analysis: RepositoryAnalysis,
) -> DeploymentConfig:
    return DeploymentConfig(
        slug=slug,
        app_name=app_name,
        app_type=app_type,
        port=resolve_port(app_type, analysis.port),
        build_cmd=analysis.build_cmd,
        start_cmd=analysis.start_cmd,
        python_version=analysis.python_version,
    )
