"""
CLI display modules.
"""

from cli.display.tables import display_sequence, display_file_info
from cli.display.log_handler import setup_logging

__all__ = [
    "display_sequence",
    "display_file_info",
    "setup_logging",
]
