"""Repository analyzer: best-effort extraction of deployment hints.

Analysis flow:
1. package.json      → build/start commands and a port from the start script.
2. requirements.txt  → Python runtime version (pyproject.toml / runtime.txt / default).
3. Dockerfile        → EXPOSEd port, overwriting any port found in step 1.

Each step is isolated: a read or parse error in one file is logged and that
file's contribution is skipped. analyze_repository() never raises.
"""

import logging
from pathlib import Path

from slug_processor.detector.app_type import marker_exists
from slug_processor.detector.dockerfile import parse_dockerfile_port
from slug_processor.detector.package_json import parse_package_json
from slug_processor.detector.python_version import detect_python_version
from slug_processor.detector.types import RepositoryAnalysis

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def analyze_repository(repo_dir: Path) -> RepositoryAnalysis:
    """Run every file-specific analysis step on a repository directory."""
    repo_dir = Path(repo_dir)
    result = RepositoryAnalysis()

    _apply_package_json(repo_dir, result)
    _apply_python_version(repo_dir, result)
    # Dockerfile port always wins, so it runs last.
    _apply_dockerfile(repo_dir, result)

    _log_result(repo_dir, result)
    return result


# ---------------------------------------------------------------------------
# File-specific steps
# ---------------------------------------------------------------------------

def _apply_package_json(repo_dir: Path, result: RepositoryAnalysis) -> None:
    if not marker_exists(repo_dir, "package.json"):
        return
    try:
        hints = parse_package_json(repo_dir)
    except (OSError, ValueError, RecursionError) as exc:
        logger.error("Failed to parse package.json: %s", exc)
        return

    result.build_cmd = hints.build_cmd
    result.start_cmd = hints.start_cmd
    if hints.port is not None:
        result.port = hints.port


def _apply_python_version(repo_dir: Path, result: RepositoryAnalysis) -> None:
    if not marker_exists(repo_dir, "requirements.txt"):
        return
    result.python_version = detect_python_version(repo_dir)


def _apply_dockerfile(repo_dir: Path, result: RepositoryAnalysis) -> None:
    if not marker_exists(repo_dir, "Dockerfile"):
        return
    try:
        port = parse_dockerfile_port(repo_dir)
    except (OSError, ValueError) as exc:
        logger.error("Failed to read Dockerfile: %s", exc)
        return

    if port is not None:
        result.port = port


def _log_result(repo_dir: Path, result: RepositoryAnalysis) -> None:
    logger.info(
        "Analysis complete for %s: port=%s build=%s start=%s python=%s",
        repo_dir.name,
        result.port,
        result.build_cmd,
        result.start_cmd,
        result.python_version,
    )
