"""
Presentation — Console rendering helpers (symbols, menus, framed output)
"""

from .symbols import SymbolSet, UNICODE, ASCII, get_symbols, safe_print, supports_unicode
from .template import OutputTemplate
from .menus import format_menu, format_yes_no, format_selected

__all__ = [
    'SymbolSet', 'UNICODE', 'ASCII', 'get_symbols', 'safe_print', 'supports_unicode',
    'OutputTemplate',
    'format_menu', 'format_yes_no', 'format_selected',
]
