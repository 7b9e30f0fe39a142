from __future__ import annotations

import logging

from starlette.config import Config

config = Config(".env")

LOG_LEVEL = config("LOG_LEVEL", cast=int, default=logging.WARNING)
LOGGING_CONFIG_PATH = config("LOGGING_CONFIG_PATH", default="logging.yaml")
