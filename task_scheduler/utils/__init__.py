"""Utility functions."""

from .config import get_default_config, load_config, merge_config, resolve_config
from .datetime_utils import format_datetime, hours_until, parse_datetime
from .logging_utils import configure_logging

__all__ = [
    'get_default_config',
    'load_config',
    'merge_config',
    'resolve_config',
    'format_datetime',
    'hours_until',
    'parse_datetime',
    'configure_logging',
]
