"""Structured logging via structlog.

The detector, the clone helper, the router and the Nomad client log through
stdlib `logging`, while the deploy service uses `structlog.get_logger()`.
Both end up on one root handler whose `structlog.stdlib.ProcessorFormatter`
runs the same shared processors, so every line gets a level, a timestamp and
the current `request_id` whichever API produced it.

Renderer selection:
  debug=True : `ConsoleRenderer` with colours for local development.
  debug=False: `JSONRenderer` for machine-parseable logs in production.

`request_id` comes from `slug_processor.core.middleware`, so per-slug events
can be correlated with the HTTP request that triggered them.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

import structlog

from slug_processor.core.middleware import get_request_id


def _inject_request_id(
    logger: logging.Logger,
    method: str,
    event_dict: dict,
) -> dict:
    """Structlog processor: inject request_id from the middleware ContextVar."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def configure_structlog(debug: bool = True, stream: Optional[IO[str]] = None) -> None:
    """Configure structlog and the root stdlib logger.

    Call once from `create_app()` before any routers are registered.
    Calling again replaces the handler installed by the previous call.
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _inject_request_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # foreign_pre_chain runs the shared processors for plain logging records;
    # structlog events already went through them above.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)
