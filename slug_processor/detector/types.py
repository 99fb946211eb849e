"""Shared types for the detector module.

Every field of RepositoryAnalysis is independently optional. A None value
means "not determined" and is never used to signal an error.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class AppType(StrEnum):
    """Runtime category inferred from marker files."""

    NODE = "node"
    PYTHON = "python"
    GO = "go"
    UNKNOWN = "unknown"


@dataclass
class RepositoryAnalysis:
    """Best-effort deployment hints extracted from a repository checkout."""

    port: Optional[int] = None
    build_cmd: Optional[str] = None
    start_cmd: Optional[str] = None
    python_version: Optional[str] = None
