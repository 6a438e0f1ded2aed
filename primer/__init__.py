"""
Primer — Prompt composer for AI assistants

Concatenates a base prompt with optional blocks picked through menus:
work type, tech stack, extra context, project details, question.

Usage:
    primer                                   # interactive menus
    primer compose --type documentation --context security -q "Review my API docs"
    primer fragments
    primer types
    primer config --set output.clipboard false
"""

__version__ = "0.1.0"

from .core.fragments import Fragment, FragmentLibrary, UnknownFragmentError, get_library
from .core.selection import Selection
from .core.worktypes import WorkType, WORK_TYPES, get_work_type
from .core.composer import Session, ComposedPrompt, compose_prompt

from .presentation.symbols import get_symbols, SymbolSet, UNICODE, ASCII

from .config import Config, ConfigManager, get_config, DisplayConfig, OutputConfig

__all__ = [
    # Core
    'Fragment', 'FragmentLibrary', 'UnknownFragmentError', 'get_library',
    'Selection',
    'WorkType', 'WORK_TYPES', 'get_work_type',
    'Session', 'ComposedPrompt', 'compose_prompt',
    # Presentation
    'get_symbols', 'SymbolSet', 'UNICODE', 'ASCII',
    # Config
    'Config', 'ConfigManager', 'get_config', 'DisplayConfig', 'OutputConfig',
]
