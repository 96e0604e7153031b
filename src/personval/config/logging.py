"""structlog rendering for personval's stdlib loggers.

personval modules log through ``logging.getLogger(__name__)``; this
module installs a single stderr handler on the ``personval`` logger that
renders those records with structlog, as console text or JSON lines.
The root logger is left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """(Re)install the personval stderr handler.

    Args:
        verbose: Let DEBUG records through; otherwise WARNING and above.
        log_json: Render JSON lines instead of console text.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    pv_logger = logging.getLogger("personval")
    pv_logger.handlers = [handler]
    pv_logger.propagate = False
    pv_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
