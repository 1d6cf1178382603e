"""Application logging configuration values."""

import os


APP_LOG_LEVEL = (os.getenv("CLASSNAME_PREFIX_LOG_LEVEL", "WARNING") or "WARNING").upper()
APP_LOG_FORMAT = os.getenv(
    "CLASSNAME_PREFIX_LOG_FORMAT",
    "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] [%(unit)s] %(message)s",
)
APP_LOG_DATEFMT = os.getenv("CLASSNAME_PREFIX_LOG_DATEFMT", "%H:%M:%S")


__all__ = [
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
]
