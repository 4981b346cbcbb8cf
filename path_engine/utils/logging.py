"""
Logging utilities for the path engine.

The library itself only creates module loggers under the "path_engine"
namespace. Applications that want console or file output call
setup_logging() (or setup_logging_from_config()).
"""

import logging
import os
import sys
import time
from datetime import datetime
from typing import Dict, Optional

LOGGER_NAME = "path_engine"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}


class LogFormatter(logging.Formatter):
    """Log formatter that colors the level name on terminals."""

    RESET = '\033[0m'

    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m\033[1m'
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.

        Args:
            colored: Whether to use colored output
            *args: Additional formatter args
            **kwargs: Additional formatter kwargs
        """
        self.colored = colored and sys.platform != 'win32'
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)

        if self.colored and record.levelname in self.LEVEL_COLORS:
            colored_level = f"{self.LEVEL_COLORS[record.levelname]}{record.levelname}{self.RESET}"
            formatted_msg = formatted_msg.replace(record.levelname, colored_level, 1)

        return formatted_msg


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None,
                  colored: bool = True) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the path_engine logger.

    Calling it again for a logger that already has handlers is a no-op.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level
        file_level: File logging level
        component: Optional component name for the logger
        colored: Whether console output is colored

    Returns:
        logging.Logger: Configured logger
    """
    logger_name = LOGGER_NAME
    if component:
        logger_name = f"{logger_name}.{component}"

    logger = logging.getLogger(logger_name)

    if logger.handlers:
        return logger

    console = LOG_LEVELS.get(console_level.upper(), logging.INFO)
    to_file = LOG_LEVELS.get(file_level.upper(), logging.DEBUG)
    logger.setLevel(min(console, to_file) if log_file else console)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console)
    console_handler.setFormatter(LogFormatter(
        colored=colored,
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(to_file)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s",
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_config(config: 'Config') -> logging.Logger:
    """
    Set up logging from the "logging" section of a configuration.

    logging.file names the log file. When it is unset and
    logging.to_default_file is true, the dated file from
    get_default_log_file() is used.

    Args:
        config: The configuration to read

    Returns:
        logging.Logger: Configured logger
    """
    log_file = config.get('logging.file')
    if not log_file and config.get('logging.to_default_file', False):
        log_file = get_default_log_file()

    return setup_logging(
        log_file=log_file,
        console_level=config.get('logging.console_level', "INFO"),
        file_level=config.get('logging.file_level', "DEBUG"),
    )


def get_default_log_file() -> str:
    """
    Get the default log file path, ~/.path_engine/logs/path_engine_YYYY-MM-DD.log.

    Returns:
        str: Default log file path
    """
    log_dir = os.path.join(os.path.expanduser("~"), ".path_engine", "logs")
    date_str = datetime.now().strftime("%Y-%m-%d")
    return os.path.join(log_dir, f"path_engine_{date_str}.log")


def log_exception(logger: logging.Logger, exception: BaseException,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception with its traceback.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: Message to log with the exception
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Times named operations and logs their duration."""

    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize performance logger.

        Args:
            logger: Logger to use
            component: Component name
        """
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        """
        Start timing an operation.

        Args:
            name: Operation name
        """
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        End timing an operation and log the duration.

        Args:
            name: Operation name
            level: Log level

        Returns:
            float: Duration in seconds
        """
        if name not in self.start_times:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - self.start_times.pop(name)
        self.log(name, duration, level)
        return duration

    def log(self, name: str, duration: float, level: str = "DEBUG") -> None:
        """
        Log a duration.

        Args:
            name: Operation name
            duration: Duration in seconds
            level: Log level
        """
        self.logger.log(LOG_LEVELS.get(level.upper(), logging.DEBUG),
                        f"{self.component} {name} took {duration:.4f} seconds")
