"""Nomad client for dispatching parameterized deployment jobs."""

from slug_processor.nomad.client import NomadClient, build_dispatch_meta, select_job_template

__all__ = ["NomadClient", "build_dispatch_meta", "select_job_template"]
