"""
Services — External collaborators (clipboard)
"""

from .clipboard import copy_to_clipboard

__all__ = ['copy_to_clipboard']
