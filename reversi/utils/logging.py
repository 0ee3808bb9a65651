# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured logging configuration using structlog.

Engine modules log board values as they are (``Cell`` members and
``Coordinate`` tuples); the ``render_board_values`` processor turns them
into color names and move notation before rendering, so both the console
and the JSON output read like a game record.

Example:
    >>> from reversi.utils.logging import setup_logging, get_logger
    >>> from reversi.config import get_settings
    >>> setup_logging(get_settings())
    >>> logger = get_logger(__name__)
    >>> logger.info("Root search finished", color=Cell.BLACK, move=Coordinate(2, 3))
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

if TYPE_CHECKING:
    from reversi.config.settings import Settings


def render_board_values(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace Cell and Coordinate values (also inside lists) with readable text."""
    for key, value in event_dict.items():
        event_dict[key] = _render(value)
    return event_dict


def _render(value: Any) -> Any:
    from reversi.engines.board import Cell, Coordinate

    if isinstance(value, Cell):
        return value.name.lower()
    if isinstance(value, Coordinate):
        return value.notation
    if isinstance(value, list):
        return [_render(item) for item in value]
    return value


def setup_logging(settings: "Settings") -> None:
    """Configure structured logging for the engine.

    - Development or debug: colored console output
    - Otherwise: JSON output

    Args:
        settings: Settings containing log_level and debug flag.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        render_board_values,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_development or settings.debug:
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Registry events go through the standard library at the same level
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    logging.getLogger("reversi").setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module name."""
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Bind variables to every later log call in this context.

    Example:
        >>> bind_context(game_id="abc-123", difficulty="hard")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
