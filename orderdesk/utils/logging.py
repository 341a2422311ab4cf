# orderdesk/utils/logging.py
import logging

from orderdesk.utils.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
BASE_LOGGER = "orderdesk"


def setup_logging() -> logging.Logger:
    level = getattr(logging, LOG_LEVEL, logging.INFO)

    logger = logging.getLogger(BASE_LOGGER)
    logger.setLevel(level)

    # jeden handler na proces, bez duplikatow przy reloadzie
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.setLevel(level)
        logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER)
    if not name:
        return base
    # "orderdesk.services.x" -> dziecko "services.x"
    if name.startswith(BASE_LOGGER + "."):
        name = name[len(BASE_LOGGER) + 1:]
    return base.getChild(name)


setup_logging()
