"""Route chainctl diagnostics to stderr through structlog.

Results always go to stdout, so every log line goes to stderr where it
cannot corrupt ``--json`` output. Console lines are the default;
``--log-json`` switches to one JSON object per line, tagged with the
chainctl version and carrying tracebacks as structured data.

Modules log through the stdlib (``logging.getLogger(__name__)``). The
lifecycle binds the chain being managed as ``chain`` context, which is
merged into every line emitted while it runs.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from chainctl import __version__

# Loggers whose records would otherwise leak through at DEBUG.
_NOISY_LOGGERS = ("asyncio",)


def _add_app_version(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("app", f"chainctl/{__version__}")
    return event_dict


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    ``-v`` lowers the ``chainctl`` logger to DEBUG so each binary
    invocation and lifecycle transition is shown; third-party loggers
    stay at WARNING either way. Safe to call repeatedly.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    render: list[structlog.types.Processor]
    if log_json:
        render = [
            _add_app_version,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        render = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

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
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("chainctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
