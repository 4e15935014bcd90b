"""
Miscellaneous utilities shared across study-order.
"""

from .logging import configure_logging, logger
from .config import DatafileParams, SOConfig, config

__all__ = ["logger", "configure_logging", "config", "SOConfig", "DatafileParams"]
