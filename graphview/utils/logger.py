"""
Logging setup for hosts embedding graphview components.

Handlers go on the ``graphview`` package logger and are driven by
``graphview.config.Settings``: level and format, an optional rotating log file,
and OTLP export of log records and spans tagged with the service name.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from opentelemetry import _logs, trace
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import (
    OTLPLogExporter as GrpcOTLPLogExporter,
)
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
    OTLPSpanExporter as GrpcOTLPSpanExporter,
)
from opentelemetry.exporter.otlp.proto.http._log_exporter import (
    OTLPLogExporter as HttpOTLPLogExporter,
)
from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
    OTLPSpanExporter as HttpOTLPSpanExporter,
)
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from graphview.config import Settings
from graphview.config import settings as default_settings

PACKAGE_LOGGER_NAME = "graphview"

_installed_handlers: list[logging.Handler] = []
_instrumentor: Optional[LoggingInstrumentor] = None


def get_package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER_NAME)


def otlp_enabled(config: Settings) -> bool:
    # The SDK-wide kill switch wins over graphview's own exporter setting.
    if os.getenv("OTEL_SDK_DISABLED", "").strip().lower() in {"1", "true", "yes", "on"}:
        return False
    return config.OTEL_EXPORTER == "otlp"


def build_otlp_exporters(protocol: str) -> tuple[object, object]:
    """Return ``(log_exporter, span_exporter)`` for the configured OTLP protocol."""
    if protocol == "http":
        return HttpOTLPLogExporter(), HttpOTLPSpanExporter()
    return GrpcOTLPLogExporter(), GrpcOTLPSpanExporter()


def _log_file_path(config: Settings) -> str:
    return os.path.join(config.LOG_DIR, config.LOG_FILE or f"{config.SERVICE_NAME}.log")


def _rotating_file_handler(config: Settings, formatter: logging.Formatter) -> RotatingFileHandler:
    os.makedirs(config.LOG_DIR, exist_ok=True)
    handler = RotatingFileHandler(
        _log_file_path(config),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def _otlp_handler(config: Settings) -> LoggingHandler:
    global _instrumentor

    resource = Resource.create({"service.name": config.SERVICE_NAME})
    log_exporter, span_exporter = build_otlp_exporters(config.OTEL_PROTOCOL)

    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))
    trace.set_tracer_provider(tracer_provider)

    logger_provider = LoggerProvider(resource=resource)
    logger_provider.add_log_record_processor(BatchLogRecordProcessor(log_exporter))
    _logs.set_logger_provider(logger_provider)

    _instrumentor = LoggingInstrumentor()
    _instrumentor.instrument(set_logging_format=False)
    return LoggingHandler(level=config.log_level_name, logger_provider=logger_provider)


def setup_logging(config: Optional[Settings] = None, *, with_console: bool = True) -> logging.Logger:
    """
    Configure the ``graphview`` package logger from settings.

    Records go to OTLP unless export is off (``GRAPHVIEW_OTEL_EXPORTER=none`` or
    ``OTEL_SDK_DISABLED``), in which case a rotating file takes over. A configured
    ``LOG_FILE`` is always written. Later calls only update the level.
    """
    config = config or default_settings
    logger = get_package_logger()
    logger.setLevel(config.log_level_name)
    if _installed_handlers:
        return logger

    formatter = logging.Formatter(fmt=config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = []
    if with_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        handlers.append(console)

    exporting = otlp_enabled(config)
    if exporting:
        handlers.append(_otlp_handler(config))
    if config.LOG_FILE or not exporting:
        handlers.append(_rotating_file_handler(config, formatter))

    for handler in handlers:
        logger.addHandler(handler)
    _installed_handlers.extend(handlers)
    logger.debug(
        "Logging configured for %s (level=%s, otlp=%s).",
        config.SERVICE_NAME,
        config.log_level_name,
        exporting,
    )
    return logger


def reset_logging() -> None:
    """Detach everything ``setup_logging`` installed."""
    global _instrumentor

    logger = get_package_logger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()
    if _instrumentor is not None:
        _instrumentor.uninstrument()
        _instrumentor = None
