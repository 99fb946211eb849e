"""Pydantic schemas for deploy endpoints.

Per-slug results are a tagged union on `status`: "deployed" carries the
dispatched job, "error" carries the message of whatever failed.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field


class DeploySuccess(BaseModel):
    slug: str
    appName: str
    jobId: str
    url: str
    status: Literal["deployed"] = "deployed"


class DeployFailure(BaseModel):
    # Any: malformed batch entries (numbers, null) are echoed back as given.
    slug: Any
    status: Literal["error"] = "error"
    error: str


DeployResult = Union[DeploySuccess, DeployFailure]


class DeployResponse(BaseModel):
    """One result per submitted slug, in submission order."""

    results: list[DeployResult] = Field(default_factory=list)


class AppListResponse(BaseModel):
    """Deployed app configs as stored in Consul, each with its `name`."""

    apps: list[dict[str, Any]]


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
