"""App type detection: classifies a checkout by marker-file presence.

Marker priority (first match wins):
  package.json     → node
  requirements.txt → python
  go.mod           → go
  (none)           → unknown

Only existence is checked; file contents are never read.
"""

import logging
from pathlib import Path

from slug_processor.detector.types import AppType

logger = logging.getLogger(__name__)

MARKER_FILES: list[tuple[str, AppType]] = [
    ("package.json", AppType.NODE),
    ("requirements.txt", AppType.PYTHON),
    ("go.mod", AppType.GO),
]


def detect_app_type(repo_dir: Path) -> AppType:
    """Return the AppType of the first marker file present in repo_dir."""
    repo_dir = Path(repo_dir)

    for filename, app_type in MARKER_FILES:
        if marker_exists(repo_dir, filename):
            logger.info("Detected app type %s (%s)", app_type, filename)
            return app_type

    logger.info("No marker file found in %s; app type unknown", repo_dir)
    return AppType.UNKNOWN


def marker_exists(repo_dir: Path, filename: str) -> bool:
    """Existence check that treats any filesystem error as 'absent'."""
    try:
        return (repo_dir / filename).exists()
    except OSError as exc:
        logger.warning("Could not stat %s in %s: %s", filename, repo_dir, exc)
        return False
