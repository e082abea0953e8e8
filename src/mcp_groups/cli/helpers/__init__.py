"""
CLI helper functions and utilities.
"""

from .display import build_group_tree, show_extension_info, show_group_table
from .errors import handle_errors

__all__ = [
    'build_group_tree',
    'show_extension_info',
    'show_group_table',
    'handle_errors',
]
