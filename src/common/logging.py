import logging
import time
from functools import wraps
from typing import Callable, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Sets up a logger with the standard project format.
    Level may be given as a logging constant or its name ("DEBUG", "INFO", ...).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def log_execution_time(logger: logging.Logger, threshold_s: float = 0.01):
    """
    Decorator to measure and log execution time of a synchronous function.
    Calls slower than `threshold_s` are logged at INFO, the rest at DEBUG.
    Failures are logged and re-raised.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}")
                raise
            elapsed = time.perf_counter() - start
            if elapsed > threshold_s:
                logger.info(f"{func.__name__} executed in {elapsed:.3f}s")
            else:
                logger.debug(f"{func.__name__} executed in {elapsed:.3f}s")
            return result
        return wrapper
    return decorator


def configure_logging(level: Union[int, str], prefix: str = "src"):
    """
    Applies a level to every already-created project logger under `prefix`.
    """
    for name in list(logging.root.manager.loggerDict):
        if name == prefix or name.startswith(prefix + "."):
            setup_logger(name, level)
