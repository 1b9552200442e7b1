# shop_api/utils/logging.py
import logging
import sys

from shop_api.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def get_logger(name: str) -> logging.Logger:
    global _configured
    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root = logging.getLogger("shop_api")
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL.upper())
        _configured = True
    return logging.getLogger(name)
