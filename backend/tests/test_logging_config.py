"""
Tests de la configuration du logging selon ENVIRONMENT.
"""
import logging
from logging.handlers import RotatingFileHandler
from types import SimpleNamespace

import pytest
from pythonjsonlogger import jsonlogger

from app.core.logging_config import NOISY_LOGGERS, build_handlers, configure_logging


def _settings(environment, level="INFO"):
    return SimpleNamespace(ENVIRONMENT=environment, LOG_LEVEL=level)


class TestBuildHandlers:

    def test_production_logs_json_to_stdout_only(self, tmp_path):
        handlers = build_handlers(_settings("production"), log_file=str(tmp_path / "app.log"))

        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, jsonlogger.JsonFormatter)

    def test_development_adds_rotating_file(self, tmp_path):
        log_file = tmp_path / "app.log"
        handlers = build_handlers(_settings("development"), log_file=str(log_file))

        assert len(handlers) == 2
        assert isinstance(handlers[1], RotatingFileHandler)
        assert not isinstance(handlers[0].formatter, jsonlogger.JsonFormatter)
        # ouverture differee : aucun fichier tant que rien n'est ecrit
        assert not log_file.exists()
        handlers[1].close()

    @pytest.mark.parametrize("environment", ["test", "staging"])
    def test_other_environments_have_no_file(self, environment):
        handlers = build_handlers(_settings(environment))

        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)


class TestConfigureLogging:

    @pytest.fixture
    def restore_levels(self):
        saved = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
        yield
        for name, level in saved.items():
            logging.getLogger(name).setLevel(level)

    def test_production_quiets_third_party_loggers(self, restore_levels):
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.DEBUG)

        configure_logging(_settings("production", "WARNING"))

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_non_production_leaves_third_party_loggers(self, restore_levels):
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.DEBUG)

        configure_logging(_settings("test"))

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG
