"""
SkyTint utilities module.
"""

from .logging import ProcessingStats, setup_console_logging

__all__ = [
    'ProcessingStats',
    'setup_console_logging',
]
