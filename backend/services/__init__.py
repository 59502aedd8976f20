"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_service import DiffService, find_forward_match

__all__ = [
    "ConfigManager",
    "DiffService",
    "find_forward_match",
]
