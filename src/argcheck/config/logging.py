"""structlog configuration for applications embedding argcheck.

argcheck only emits DEBUG records through stdlib loggers under the
``argcheck`` namespace. :func:`configure_logging` gives that namespace its
own stderr handler, rendering console lines or JSON lines through structlog,
and leaves the root logger to the host application.
"""

from __future__ import annotations

import logging
import sys

import structlog

from argcheck.config.settings import get_settings

LOGGER_NAME = "argcheck"
HANDLER_NAME = "argcheck-structlog"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def build_handler(*, log_json: bool) -> logging.Handler:
    """stderr handler rendering stdlib and structlog records alike."""
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> logging.Logger:
    """Route the ``argcheck`` logger through structlog.

    Repeated calls replace the handler installed by the previous call;
    handlers added by the application are kept.

    Args:
        verbose: DEBUG output for the ``argcheck`` logger. Defaults to
            ``ArgcheckSettings.verbose``.
        log_json: JSON renderer instead of the console renderer. Defaults to
            ``ArgcheckSettings.log_json``.

    Returns:
        The configured ``argcheck`` logger.
    """
    settings = get_settings()
    if verbose is None:
        verbose = settings.verbose
    if log_json is None:
        log_json = settings.log_json

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    lib_logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in lib_logger.handlers if h.get_name() == HANDLER_NAME]:
        lib_logger.removeHandler(old)
    lib_logger.addHandler(build_handler(log_json=log_json))
    lib_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    lib_logger.propagate = False
    return lib_logger
