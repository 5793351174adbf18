"""Logging bootstrap with optional structured (JSON) output."""

from __future__ import annotations

import logging

import structlog

from sutra.config import Settings


def _app_only_filter(record: logging.LogRecord) -> bool:
    return record.name.startswith("sutra")


def configure_logging(settings: Settings) -> None:
    """Configure the root logger according to *settings*."""
    level = getattr(logging, settings.log_level, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if settings.structured_logs:
        # Modules log through the stdlib; structlog only renders their records.
        formatter: logging.Formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(ensure_ascii=False),
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.format_exc_info,
            ],
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(_app_only_filter)
    root.addHandler(handler)

    # Quieten client libraries used by the explainer.
    for logger_name in ("httpx", "httpcore", "openai"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)
