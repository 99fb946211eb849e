"""Consul KV client for persisted deployment configs."""

from slug_processor.consul.client import ConsulClient

__all__ = ["ConsulClient"]
