import logging
import sys

from ..config import LOG_LEVEL

def get_logger():
    logger = logging.getLogger("keyprint")
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
        h.setFormatter(fmt)
        logger.addHandler(h)
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.WARNING))
    return logger
