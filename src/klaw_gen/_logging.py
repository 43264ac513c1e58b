"""structlog setup for klaw-gen.

klaw-gen only logs rejected strategy arguments and ``init()``. Every event is
tagged with the active run profile (bound by ``init()`` through structlog's
contextvars) and the Hypothesis version, so a rejected argument in a CI log
can be matched to the settings that produced it.

Output goes to a handler on the ``klaw_gen`` stdlib logger only; the root
logger and other libraries' handlers are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import hypothesis
import structlog

__all__ = [
    'LOGGER_NAME',
    'bind_profile',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'klaw_gen'


def _add_hypothesis_version(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault('hypothesis_version', hypothesis.__version__)
    return event_dict


def _event_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _add_hypothesis_version,
    ]


def bind_profile(name: str, max_examples: int) -> None:
    """Attach the active run profile to every subsequent event."""
    structlog.contextvars.bind_contextvars(gen_profile=name, gen_max_examples=max_examples)


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route klaw-gen events through structlog to stderr.

    Args:
        level: Level for the ``klaw_gen`` logger ("DEBUG", "INFO", ...).
        json_output: JSON lines if True, otherwise the structlog console renderer.
    """
    structlog.configure(
        processors=[*_event_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must pick up later reconfiguration.
        cache_logger_on_first_use=False,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_event_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    gen_logger = logging.getLogger(LOGGER_NAME)
    gen_logger.handlers.clear()
    gen_logger.addHandler(handler)
    gen_logger.propagate = False
    gen_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, normally for a ``klaw_gen.*`` module name."""
    return structlog.get_logger(name)
