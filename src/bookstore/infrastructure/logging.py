"""structlog configuration for the bookstore.

Domain code logs events such as ``book.purchased`` through
``structlog.get_logger(__name__)``; this module decides where they end
up.  Console output by default, one JSON object per line with
``--log-json``.  Everything goes to stderr so command output on stdout
stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

APP_LOGGER = "bookstore"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Args:
        verbose: Show the store's DEBUG/INFO events. Otherwise WARNING+.
        log_json: Render JSON lines instead of console text.
        stream: Where to write; defaults to the current ``sys.stderr``.

    Calling it again replaces the previous handler.
    """
    out = stream if stream is not None else sys.stderr

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        pre_chain.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
