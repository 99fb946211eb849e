"""Git checkout operations for deployment analysis.

Clones a GitHub repository identified by an `owner/repo` slug into a
per-slug directory under the configured repos root. Any previous checkout
of the same slug is replaced so redeploys always analyze the latest commit.

Security:
  - Slugs are validated against a strict pattern before any subprocess is
    spawned, so a slug can never inject git options or escape repos_dir.
"""

import logging
import re
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

_SLUG_RE = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


class CloneError(RuntimeError):
    """Raised when a slug cannot be materialised on disk."""


def validate_slug(slug: str) -> None:
    """Reject anything that is not a plain `owner/repo` identifier.

    Raises:
        CloneError: If the slug is malformed or contains path traversal.
    """
    if not isinstance(slug, str) or not _SLUG_RE.match(slug):
        raise CloneError(f"Invalid repository slug: {slug!r}")
    if any(part in (".", "..") for part in slug.split("/")):
        raise CloneError(f"Invalid repository slug: {slug!r}")


def checkout_dir_for(slug: str, repos_dir: Path) -> Path:
    """Return the local checkout path for a slug: <repos_dir>/<owner>_<repo>."""
    return Path(repos_dir) / slug.replace("/", "_", 1)


def clone_slug(
    slug: str,
    repos_dir: Path,
    base_url: str = "https://github.com",
    depth: int = 1,
    timeout: int = 300,
) -> Path:
    """Clone https://github.com/<slug>.git into the slug's checkout directory.

    Uses a shallow clone (depth=1) by default; only marker files at the
    repository root are inspected afterwards.

    Returns the path to the cloned repo root.

    Raises:
        CloneError: If the slug is invalid or git exits non-zero.
    """
    validate_slug(slug)

    repo_url = f"{base_url.rstrip('/')}/{slug}.git"
    workspace_dir = checkout_dir_for(slug, repos_dir)

    if workspace_dir.exists():
        logger.info("Removing previous checkout %s", workspace_dir)
        shutil.rmtree(workspace_dir)
    workspace_dir.parent.mkdir(parents=True, exist_ok=True)

    cmd = ["git", "clone", "--depth", str(depth), repo_url, str(workspace_dir)]
    logger.info("Cloning %s into %s", repo_url, workspace_dir)

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        raise CloneError(f"git clone timed out after {timeout}s for {slug}")

    if result.returncode != 0:
        raise CloneError(
            f"git clone failed (exit {result.returncode}): {result.stderr.strip()}"
        )

    logger.info("Clone complete: %s", workspace_dir)
    return workspace_dir
