"""Logging setup for applications that embed the client, and for the CLI.

The client itself only ever calls ``logging.getLogger(__name__)`` under the
``oms_client`` tree and never installs handlers:

- ``DEBUG``: one line per request and per response (method, path, query,
  status, body size). Bodies, headers and the API key are never logged.
- ``INFO``: non-2xx answers, with the API error type.
- ``WARNING``: transport failures and 2xx bodies that fail to decode.

``configure_logging()`` renders those records through structlog, either as
console lines or as JSON lines on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "oms_client"

# Loggers that log every connection at DEBUG under requests.
_NOISY_LOGGERS = ("urllib3", "requests")


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route client log records to stderr through structlog.

    Replaces any handlers on the root logger, so calling it again (e.g.
    once per CLI invocation) does not duplicate output.

    Args:
        verbose: Show the client's per-request DEBUG lines.
        log_json: One JSON object per line instead of console output.
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

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
