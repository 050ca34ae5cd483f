"""Logging estruturado do Voz.

structlog sobre stdlib logging. Formato "console" (default) ou "json",
escolhido por argumento ou pelas variaveis VOZ_LOG_FORMAT / VOZ_LOG_LEVEL.
Como biblioteca, o Voz so instala handler no root logger quando
`configure_logging` e chamado (a CLI chama; `get_logger` tambem).
"""

from __future__ import annotations

import logging
import os

import structlog

LOG_FORMAT_ENV = "VOZ_LOG_FORMAT"
LOG_LEVEL_ENV = "VOZ_LOG_LEVEL"
LOG_FORMATS = ("console", "json")

_configured = False


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    log_format: str | None = None,
    level: str | None = None,
    *,
    force: bool = False,
) -> None:
    """Configura structlog e o handler do root logger.

    Idempotente: apenas a primeira chamada tem efeito, exceto com `force`.

    Args:
        log_format: "console" ou "json". Formato desconhecido cai em "console".
        level: Nome do nivel (DEBUG, INFO, WARNING, ERROR).
        force: Reconfigura mesmo se ja configurado (usado pela CLI).
    """
    global _configured
    if _configured and not force:
        return

    resolved_format = (log_format or os.environ.get(LOG_FORMAT_ENV, "console")).lower()
    resolved_level = (level or os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(resolved_format),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, resolved_level, logging.WARNING))

    _configured = True


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Logger com o campo `component` vinculado (ex: "options", "history")."""
    configure_logging()
    return structlog.get_logger().bind(component=component)  # type: ignore[no-any-return]
