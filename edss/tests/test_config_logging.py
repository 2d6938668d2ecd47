from __future__ import annotations

import logging

import pytest

from edss.core.config import Settings, get_settings
from edss.core.logging import PHIRedactor, setup_logging


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults(monkeypatch):
    for name in ("EDSS_FIELD_NAMING", "EDSS_FIELD_SUFFIX", "EDSS_OUTPUT_COLUMN", "EDSS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.field_naming == "default"
    assert settings.field_suffix == ""
    assert settings.output_column == "edss"
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("EDSS_FIELD_NAMING", "redcap_pt")
    monkeypatch.setenv("EDSS_FIELD_SUFFIX", "_long")
    monkeypatch.setenv("edss_log_level", "debug")
    settings = get_settings()
    assert settings.field_naming == "redcap_pt"
    assert settings.field_suffix == "_long"
    assert settings.log_level == "DEBUG"
    assert get_settings() is settings


def _record(msg, args=()):
    return logging.LogRecord("edss", logging.INFO, __file__, 1, msg, args, None)


def test_redactor_masks_identifiers_in_message_and_args():
    redactor = PHIRedactor()
    record = _record("Patient 123.456.789-09 phone %s", ("85-98765-4321",))
    assert redactor.filter(record) is True
    assert record.getMessage() == "Patient [REDACTED] phone [REDACTED]"


def test_redactor_leaves_scores_alone():
    record = _record("Scored %s rows (%s incomplete)", (12, 3))
    PHIRedactor().filter(record)
    assert record.getMessage() == "Scored 12 rows (3 incomplete)"


def test_setup_logging_installs_redactor_once():
    setup_logging(logging.INFO)
    setup_logging("INFO")
    root = logging.getLogger()
    for handler in root.handlers:
        assert sum(isinstance(f, PHIRedactor) for f in handler.filters) <= 1
