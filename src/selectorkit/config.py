from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"
    logger_name: str = "selectorkit"


def configure_logging(config: SelectorkitConfig | None = None) -> logging.Logger:
    """Install a stderr handler and set the selectorkit logger level.

    Only the CLI calls this; library code never configures handlers.
    """
    config = config or SelectorkitConfig()
    logging.basicConfig(format=config.log_format)
    log = logging.getLogger(config.logger_name)
    log.setLevel(config.log_level.upper())
    return log
