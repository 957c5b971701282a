# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import logging.config
import os
from typing import Any

DEFAULT_LOG_LEVEL = "WARNING"

# Log levels selected by repeating the `--verbose` flag.
VERBOSITY_LEVELS = ("INFO", "DEBUG")


def load_config() -> dict[str, Any]:
    """Return configuration pulled from the environment."""
    config_keys = ("LOG_LEVEL",)

    defaults = {
        "LOG_LEVEL": DEFAULT_LOG_LEVEL,
    }

    return {key: os.getenv(key, defaults.get(key)) for key in config_keys}


def log_level(config: dict[str, Any], verbosity: int = 0) -> str:
    """Return the log level to use, with `verbosity` taking precedence over `config`."""
    if verbosity:
        return VERBOSITY_LEVELS[min(verbosity, len(VERBOSITY_LEVELS)) - 1]

    return str(config["LOG_LEVEL"]).upper()


def logging_config(level: str) -> dict[str, Any]:
    """Return a `logging.config.dictConfig` configuration sending logs to stderr."""
    return {
        "version": 1,
        "formatters": {
            "console": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"}
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
            "null": {"class": "logging.NullHandler"},
        },
        "loggers": {
            "find_merge": {"level": level, "handlers": ["console"]},
        },
        "root": {"handlers": ["null"]},
        "disable_existing_loggers": False,
    }


def configure_logging(level: str):
    logging.config.dictConfig(logging_config(level))
