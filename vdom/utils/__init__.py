"""
Utility modules for vdom.
"""

from vdom.utils.config import Config
from vdom.utils.logging import setup_logging, setup_logging_from_config, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'setup_logging_from_config',
    'PerformanceLogger',
]
