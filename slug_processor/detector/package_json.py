"""package.json parser for build/start command and port detection.

Commands are always expressed as npm invocations. A missing or empty
`build` script falls back to `npm install`, whether or not the scripts block
exists at all.
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

BUILD_SCRIPT_CMD = "npm run build"
DEFAULT_BUILD_CMD = "npm install"

# Start script preference, first non-empty script wins.
START_SCRIPTS: list[tuple[str, str]] = [
    ("start", "npm start"),
    ("dev", "npm run dev"),
]

# --port 8080 / --port=8080 / PORT=8080 / localhost:8080
_PORT_RE = re.compile(r"(?:--port[\s=]+|PORT=|:)(\d+)")


@dataclass
class PackageJsonHints:
    build_cmd: Optional[str] = None
    start_cmd: Optional[str] = None
    port: Optional[int] = None


def parse_package_json(repo_dir: Path) -> PackageJsonHints:
    """Read package.json and derive build/start commands and a port.

    Raises OSError, ValueError or RecursionError (deeply nested JSON) when
    the file cannot be read or decoded; the analyzer catches all three and
    skips this file's contribution.
    """
    pkg_path = Path(repo_dir) / "package.json"
    data = json.loads(pkg_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("package.json root is not an object")

    scripts = data.get("scripts")
    if not isinstance(scripts, dict):
        scripts = {}

    hints = PackageJsonHints()
    hints.build_cmd = BUILD_SCRIPT_CMD if scripts.get("build") else DEFAULT_BUILD_CMD

    for name, command in START_SCRIPTS:
        script = scripts.get(name)
        if not script:
            continue
        hints.start_cmd = command
        # The port is only read from the script that start_cmd runs.
        if isinstance(script, str):
            hints.port = extract_script_port(script)
        break

    return hints


def extract_script_port(script: str) -> Optional[int]:
    """Return the first port literal found in a start script, or None."""
    if not script:
        return None
    match = _PORT_RE.search(script)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs past the int conversion limit.
        return None
