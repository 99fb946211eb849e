"""Dockerfile port detection."""

import re
from pathlib import Path
from typing import Optional

_EXPOSE_RE = re.compile(r"EXPOSE\s+(\d+)", re.IGNORECASE)


def parse_dockerfile_port(repo_dir: Path) -> Optional[int]:
    """Return the first EXPOSEd port of the repository's Dockerfile.

    Raises OSError or UnicodeDecodeError on read failure.
    """
    content = (Path(repo_dir) / "Dockerfile").read_text(encoding="utf-8")
    return extract_exposed_port(content)


def extract_exposed_port(content: str) -> Optional[int]:
    match = _EXPOSE_RE.search(content)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None
