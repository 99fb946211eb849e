"""Consul KV client for deployment configs.

Uses an injected httpx.AsyncClient whose base_url points at the Consul HTTP
API. Every config is stored as JSON under `apps/<app_name>/config`; Consul
returns values base64-encoded on reads.

Errors are not handled here: `raise_for_status()` lets httpx exceptions
propagate to the caller, which decides whether they are per-item or
request-level failures.
"""

import base64
import json

import httpx

from slug_processor.deploy.config import DeploymentConfig

APPS_PREFIX = "apps/"


def config_key(app_name: str) -> str:
    return f"{APPS_PREFIX}{app_name}/config"


class ConsulClient:
    """Thin wrapper over the Consul KV endpoints the service needs."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def put_config(self, config: DeploymentConfig) -> None:
        """PUT /v1/kv/apps/<app_name>/config with the JSON-serialised config."""
        response = await self._http.put(
            f"/v1/kv/{config_key(config.app_name)}",
            json=config.to_dict(),
        )
        response.raise_for_status()

    async def list_apps(self) -> list[dict]:
        """GET /v1/kv/apps/?recurse=true and decode every stored config.

        Returns one record per key: the decoded config merged over
        `name`, the key's second path segment. Consul answers 404 when
        nothing has been stored under the prefix yet; that is an empty list.
        """
        response = await self._http.get(
            f"/v1/kv/{APPS_PREFIX}",
            params={"recurse": "true"},
        )
        if response.status_code == 404:
            return []
        response.raise_for_status()
        return [decode_entry(item) for item in response.json()]


def decode_entry(item: dict) -> dict:
    """Turn one Consul KV entry into an app record."""
    raw = item.get("Value")
    config = json.loads(base64.b64decode(raw).decode("utf-8")) if raw else {}
    return {"name": item["Key"].split("/")[1], **config}
