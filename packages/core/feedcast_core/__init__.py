"""
Feedcast Core Package.

This package contains the pieces shared by the RSS and JSON Feed packages:
logging, settings, errors, date formatting and language codes.
"""

__version__ = "0.1.0"

from .logging_config import init_logging, get_logger

__all__ = ["init_logging", "get_logger"]
