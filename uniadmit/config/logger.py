# uniadmit/config/logger.py
import logging
import sys

from uniadmit.config.config import settings

LOGGER_NAME = "uniadmit"
LOG_FORMAT = "%(asctime)s %(levelname)-5s [uniadmit] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def level_for(env: str) -> int:
    """В dev видно разбор каждой волны (DEBUG), в остальных окружениях только итоги."""
    return logging.DEBUG if env == "dev" else logging.INFO


def build_logger(env: str) -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level_for(env))
    # повторный вызов не должен удваивать строки в stdout
    if not any(getattr(h, "_uniadmit", False) for h in log.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        handler._uniadmit = True
        log.addHandler(handler)
    for h in log.handlers:
        h.setLevel(log.level)
    return log


logger = build_logger(settings.env)
