"""
Logging configuration.

On Cloud Run, records go to Google Cloud Logging, which indexes the
`json_fields` passed via `extra`. Locally, records are printed to stdout on a
single line, with those fields appended as sorted key=value pairs so search
and lookup logs can be grepped by order id or email.
"""

import logging
import os
import sys

LOCAL_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Flag to track if logging is already configured
_logging_configured = False


class LocalFormatter(logging.Formatter):
    """Single-line formatter that renders json_fields as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        json_fields = getattr(record, "json_fields", None)
        if json_fields:
            pairs = " ".join(
                f"{key}={json_fields[key]}" for key in sorted(json_fields)
            )
            message = f"{message} | {pairs}"

        return message


def setup_logging(service_name: str = "wooinbox", level: int | None = None):
    """
    Configure root logging once per process.

    Args:
        service_name: Name reported to Cloud Logging
        level: Log level; defaults to LOG_LEVEL from the environment or INFO
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

    # K_SERVICE is set by Cloud Run
    if os.getenv("K_SERVICE"):
        _setup_cloud_logging(service_name, level)
    else:
        _setup_local_logging(level)

    _logging_configured = True


def _setup_cloud_logging(service_name: str, level: int):
    try:
        import google.cloud.logging

        client = google.cloud.logging.Client()
        client.setup_logging(log_level=level)

        logging.info("Cloud Logging configured for service: %s", service_name)
    except Exception as e:
        _setup_local_logging(level)
        logging.warning("Failed to setup Cloud Logging, using local logging: %s", e)


def _setup_local_logging(level: int):
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LocalFormatter(LOCAL_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
