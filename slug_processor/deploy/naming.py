"""Scheduler-safe resource names derived from repository slugs."""

import re

_UNSAFE_CHARS_RE = re.compile(r"[^a-z0-9-]")


def sanitize_app_name(slug: str) -> str:
    """Return the lowercased repo segment of `owner/repo` with unsafe chars as '-'.

    'user/My_App@Name!' -> 'my-app-name-'. The slug is assumed to have been
    validated as two segments already.
    """
    repo = slug.split("/")[1]
    return _UNSAFE_CHARS_RE.sub("-", repo.lower())
