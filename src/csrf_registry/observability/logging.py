"""Logging config for hosts embedding the registry."""

from __future__ import annotations

import json
import logging
import os
import time
from collections.abc import Mapping
from logging.config import dictConfig
from typing import Any

from opentelemetry import baggage, trace

REGISTRY_LOGGERS: tuple[str, ...] = (
    "csrf_registry.tokens",
    "csrf_registry.entropy",
    "csrf_registry.runtime",
)


def _level(env_var: str, default: str) -> str:
    return os.getenv(env_var, default).upper()


def _managed_runtime() -> bool:
    # Cloud Run and Kubernetes ingestion parse JSON lines into structured payloads.
    return bool(os.getenv("K_SERVICE") or os.getenv("KUBERNETES_SERVICE_HOST"))


def _encode(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


class ExtrasFormatter(logging.Formatter):
    """Render registry events with their ``data`` payload attached."""

    def format(self, record: logging.LogRecord) -> str:
        data = record.__dict__.get("data")
        if _managed_runtime():
            return _encode(self._payload(record, data))

        formatted = super().format(record)
        if data:
            return f"{formatted} | data={_encode(data)}"
        return formatted

    def _payload(self, record: logging.LogRecord, data: Any) -> dict[str, Any]:
        stamp = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        payload: dict[str, Any] = {
            "message": record.getMessage(),
            "severity": record.levelname,
            "logger": record.name,
            "timestamp": f"{stamp}.{int(record.msecs):03d}Z",
        }
        if data:
            payload["data"] = data
        otel = record.__dict__.get("otel")
        if otel:
            payload["otel"] = otel
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return payload


class OtelContextLogFilter(logging.Filter):
    """Attach the active trace/span ids and baggage as ``record.otel``."""

    def filter(self, record: logging.LogRecord) -> bool:
        otel: dict[str, Any] = {}
        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            otel["trace_id"] = f"{span_context.trace_id:032x}"
            otel["span_id"] = f"{span_context.span_id:016x}"

        baggage_values = baggage.get_all()
        if baggage_values:
            otel["baggage"] = {key: str(value) for key, value in baggage_values.items()}

        if otel:
            record.otel = otel
        return True


def build_log_config(
    *,
    root_level_env: str = "LOG_LEVEL",
    root_default: str = "INFO",
    registry_level_env: str = "CSRF_LOG_LEVEL",
    registry_default: str = "WARNING",
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a dictConfig-compatible logging configuration."""
    loggers: dict[str, dict[str, Any]] = {
        name: {
            "level": _level(registry_level_env, registry_default),
            "handlers": ["console"],
            "propagate": False,
        }
        for name in REGISTRY_LOGGERS
    }
    if extra_loggers:
        loggers.update(extra_loggers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": ExtrasFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            }
        },
        "filters": {"otel_context": {"()": OtelContextLogFilter}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stdout",
                "filters": ["otel_context"],
            }
        },
        "root": {"level": _level(root_level_env, root_default), "handlers": ["console"]},
        "loggers": loggers,
    }


def configure_logging(**kwargs: Any) -> None:
    """Apply ``build_log_config(**kwargs)``."""
    dictConfig(build_log_config(**kwargs))


__all__ = [
    "REGISTRY_LOGGERS",
    "ExtrasFormatter",
    "OtelContextLogFilter",
    "build_log_config",
    "configure_logging",
]
