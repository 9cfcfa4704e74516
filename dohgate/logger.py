import logging

from dohgate.config import Config


def get_logger(name="dohgate"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(asctime)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    return logger
