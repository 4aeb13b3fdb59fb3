"""structlog configuration for isocalc.

stdout carries only the command result, so log records always go to a
separate stream (stderr unless told otherwise). Library modules log
through ``logging.getLogger(__name__)``; the records are rendered by
structlog's ProcessorFormatter:

- Console (default): ``[debug    ] shifted 2019-01-31 by +1 days ...``
- JSON (``--log-json``): one object per line with ``event``, ``level``,
  ``logger`` and an ISO ``timestamp``
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "isocalc"


def _processors(log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    # timestamps in JSON output only
    if log_json:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    return processors


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route isocalc log records through structlog.

    Replaces any handlers on the root logger, so calling this more than
    once (as repeated CLI invocations in one process do) never stacks
    output.

    Args:
        verbose: Show isocalc DEBUG records. Otherwise only WARNING and up.
        log_json: Render JSON lines instead of console text.
        stream: Where to write; defaults to the current ``sys.stderr``.
    """
    if stream is None:
        stream = sys.stderr

    shared = _processors(log_json)
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


__all__ = ["LOGGER_NAME", "configure_logging"]
