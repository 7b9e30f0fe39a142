"""Tests for the logging configuration."""
from __future__ import annotations

import logging

from ppcalc import config
from ppcalc.logging import configure_logging

LOGGING_YAML = """
version: 1
disable_existing_loggers: false
handlers:
  console:
    class: logging.StreamHandler
    level: DEBUG
root:
  level: DEBUG
  handlers: [console]
"""


def test_configure_logging(tmp_path):
    path = tmp_path / "logging.yaml"
    path.write_text(LOGGING_YAML)

    configure_logging(str(path))

    root = logging.getLogger()
    assert root.level == config.LOG_LEVEL
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)
