"""
Utility modules for the path engine.
"""

from path_engine.utils.config import Config
from path_engine.utils.logging import (
    setup_logging, setup_logging_from_config, log_exception, PerformanceLogger
)

__all__ = [
    'Config',
    'setup_logging',
    'setup_logging_from_config',
    'log_exception',
    'PerformanceLogger',
]
