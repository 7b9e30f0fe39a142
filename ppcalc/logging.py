from __future__ import annotations

import logging.config

import yaml

from ppcalc import config


def configure_logging(path: str | None = None) -> None:
    with open(path or config.LOGGING_CONFIG_PATH) as f:
        logging_config = yaml.safe_load(f.read())
        logging.config.dictConfig(logging_config)

    logging.getLogger().setLevel(config.LOG_LEVEL)
