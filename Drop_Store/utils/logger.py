import logging
import sys

LOGGER_NAME = "Drop_Store"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(module: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{module}")


def log(level: str, module: str, message: str):
    """
    Log `message` under Drop_Store.<module>.

    `level` is a level name such as "INFO" or "WARNING".
    """
    get_logger(module).log(logging.getLevelName(level.upper()), message)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.
    Calling it again only changes the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(getattr(h, "_drop_store", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._drop_store = True
        logger.addHandler(handler)

    return logger
