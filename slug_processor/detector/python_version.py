"""Python runtime version detection for python apps.

Priority:
  1. pyproject.toml: first `python = "<constraint>"` binding (Poetry style or
     requires-python), reduced to digits and dots, at most 4 characters.
  2. runtime.txt   : `python-<major>.<minor>` (Heroku style).
  3. DEFAULT_PYTHON_VERSION.

Files are matched with regexes rather than a TOML parser so that a
malformed pyproject.toml still yields a version when the binding is legible.
"""

import logging
import re
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_PYTHON_VERSION = "3.11"

_PYPROJECT_PYTHON_RE = re.compile(r'python\s*=\s*"([^"]+)"')
_RUNTIME_PYTHON_RE = re.compile(r"python-(\d+\.\d+)")
_NON_VERSION_CHARS_RE = re.compile(r"[^\d.]")


def detect_python_version(repo_dir: Path) -> str:
    """Resolve the Python version for a repository. Never raises."""
    repo_dir = Path(repo_dir)

    for filename, extract in (
        ("pyproject.toml", extract_pyproject_python),
        ("runtime.txt", extract_runtime_python),
    ):
        content = _read_optional(repo_dir / filename)
        if content is None:
            continue
        version = extract(content)
        if version:
            logger.debug("Python version %s from %s", version, filename)
            return version

    return DEFAULT_PYTHON_VERSION


def extract_pyproject_python(content: str) -> Optional[str]:
    """Reduce the first `python = "..."` binding to a bare version.

    '^3.9' -> '3.9', '>=3.10,<4' -> '3.10'. Returns None when the binding is
    absent or contains no digits.
    """
    match = _PYPROJECT_PYTHON_RE.search(content)
    if not match:
        return None
    version = _NON_VERSION_CHARS_RE.sub("", match.group(1))[:4]
    return version or None


def extract_runtime_python(content: str) -> Optional[str]:
    match = _RUNTIME_PYTHON_RE.search(content)
    return match.group(1) if match else None


def _read_optional(path: Path) -> Optional[str]:
    try:
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable %s: %s", path.name, exc)
        return None
