"""Logging setup for sml-reader.

structlog and stdlib records both leave through a single stderr handler,
rendered for the console or as JSON lines (--log-json). Events emitted
during a read carry the `root` folder bound by SMLFolderReader, and their
`path` field is shown relative to it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

PACKAGE_LOGGER = "sml_reader"


def relativize_path(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Rewrite `path` relative to the bound `root` folder when it lies below it."""
    root = event_dict.get("root")
    path = event_dict.get("path")
    if root and path:
        try:
            event_dict["path"] = Path(path).relative_to(root).as_posix()
        except ValueError:
            pass  # outside the root, keep as given
    return event_dict


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        relativize_path,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and point structlog at stdlib logging.

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: Let sml_reader DEBUG events through (folder visits, accepted
            objects). Otherwise only warnings and errors are shown.
        log_json: Render JSON lines instead of console output.
    """
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
