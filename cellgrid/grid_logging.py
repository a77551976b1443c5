"""Logging helpers for cellgrid.

All cellgrid loggers live under the ``CELLGRID`` namespace, so a single call
to :func:`log_to_stderr` is enough to see what the grids are doing::

    from cellgrid.grid_logging import DEBUG, log_to_stderr

    log_to_stderr(DEBUG)

"""

import functools
import inspect
import logging
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING

__all__ = [
    "CRITICAL",
    "DEBUG",
    "ERROR",
    "INFO",
    "NOTSET",
    "WARNING",
    "create_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]

LOGGER_NAME = "CELLGRID"
DEFAULT_FORMAT = "[%(name)s %(levelname)s] %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def create_module_logger(name: str | None = None) -> logging.Logger:
    """Create a module level logger.

    Args:
        name: name of the module; when omitted the name of the calling module is used.

    Returns:
        a logger nested under the CELLGRID logger
    """
    if name is None:
        frame = inspect.stack()[1]
        module = inspect.getmodule(frame[0])
        name = module.__name__ if module is not None else "__main__"

    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def get_rootlogger() -> logging.Logger:
    """Return the root logger of cellgrid."""
    return logging.getLogger(LOGGER_NAME)


def method_logger(name: str):
    """Decorator that logs every call of the decorated method at DEBUG level.

    Args:
        name: name of the module the method is defined in, typically ``__name__``

    """
    logger = logging.getLogger(f"{LOGGER_NAME}.{name}")

    def decorator(meth):
        @functools.wraps(meth)
        def wrapper(self, *args, **kwargs):
            if logger.isEnabledFor(DEBUG):
                logger.debug(
                    f"calling {self.__class__.__name__}.{meth.__name__} "
                    f"with args {args} and kwargs {kwargs}"
                )
            return meth(self, *args, **kwargs)

        return wrapper

    return decorator


def log_to_stderr(level: int = DEBUG, pass_root_logger_level: bool = False) -> logging.Logger:
    """Attach a stream handler writing to stderr to the cellgrid logger.

    Args:
        level: the level of the handler (and of the logger)
        pass_root_logger_level: if True, the cellgrid logger keeps the level of the
                                python root logger instead of ``level``

    Returns:
        the cellgrid root logger

    """
    logger = get_rootlogger()
    formatter = logging.Formatter(DEFAULT_FORMAT)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    if not pass_root_logger_level:
        logger.setLevel(level)
    else:
        logger.setLevel(logging.getLogger().level)

    # avoid stacking handlers when called repeatedly
    for existing in list(logger.handlers):
        if type(existing) is logging.StreamHandler:
            logger.removeHandler(existing)
    logger.addHandler(handler)
    return logger
