"""
Core — Fragment catalog, selection accumulator, decision table, composition
"""

from .fragments import (
    Fragment, FragmentLibrary, UnknownFragmentError, CATALOG, get_library,
)
from .selection import Selection
from .worktypes import (
    WorkType, WORK_TYPES, OPTIONAL_CONTEXTS, CUSTOM_CHOICES,
    get_work_type, parse_work_type, work_type_keys,
)
from .composer import (
    Session, ComposedPrompt, ProjectField, PROJECT_FIELDS, PROJECT_FIELD_KEYS,
    QUESTION_SEPARATOR, compose_prompt, available_contexts, parse_index_selection,
    build_project_context, add_project_context, append_question,
    choose_tech_context, offers_project_context,
)

__all__ = [
    'Fragment', 'FragmentLibrary', 'UnknownFragmentError', 'CATALOG', 'get_library',
    'Selection',
    'WorkType', 'WORK_TYPES', 'OPTIONAL_CONTEXTS', 'CUSTOM_CHOICES',
    'get_work_type', 'parse_work_type', 'work_type_keys',
    'Session', 'ComposedPrompt', 'ProjectField', 'PROJECT_FIELDS', 'PROJECT_FIELD_KEYS',
    'QUESTION_SEPARATOR', 'compose_prompt', 'available_contexts', 'parse_index_selection',
    'build_project_context', 'add_project_context', 'append_question',
    'choose_tech_context', 'offers_project_context',
]
