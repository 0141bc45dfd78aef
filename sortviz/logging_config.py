"""
Logging Configuration
Sets up the package logger for the visualizer.
"""
import logging
import sys
from typing import Optional

# Modules that log once per animation step. Above DEBUG unless asked for.
STEP_LOGGERS = ("sortviz.presenter",)

LOG_FORMAT  = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  step_detail: bool = False) -> logging.Logger:
    """
    Configures the 'sortviz' logger and returns it.

    Args:
        level: Logging level for the package (e.g. logging.DEBUG).
        log_file: Optional path to also write logs to.
        step_detail: Keep per-step statistics lines at ``level``. When False
            the step loggers never go below INFO, so --debug stays readable
            during a run of a few thousand steps.
    """
    logger = logging.getLogger("sortviz")
    logger.setLevel(level)
    logger.propagate = False

    # Restarting the app from the same interpreter must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    step_level = level if step_detail else max(level, logging.INFO)
    for name in STEP_LOGGERS:
        logging.getLogger(name).setLevel(step_level)

    logger.debug("Logging initialized (step detail %s).", "on" if step_detail else "off")
    return logger
