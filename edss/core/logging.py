"""Logging helpers for the EDSS calculator."""
from __future__ import annotations

import logging
import re
from typing import Union

_RE_SENSITIVE = re.compile(r"(\b\d{3}\.?\d{3}\.?\d{3}-?\d{2}\b|\b\d{2,3}-?\d{4,5}-?\d{4}\b)")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class PHIRedactor(logging.Filter):
    """Filter that redacts CPF- and phone-like identifiers from log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if isinstance(record.msg, str):
            record.msg = _RE_SENSITIVE.sub("[REDACTED]", record.msg)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {key: _redact_arg(value) for key, value in record.args.items()}
            else:
                record.args = tuple(_redact_arg(value) for value in record.args)
        return True


def _redact_arg(value: object) -> object:
    if isinstance(value, str):
        return _RE_SENSITIVE.sub("[REDACTED]", value)
    return value


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure global logging handlers with identifier redaction."""

    logging.basicConfig(level=level, format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(existing, PHIRedactor) for existing in handler.filters):
            handler.addFilter(PHIRedactor())
