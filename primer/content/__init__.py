"""
Content — Static text content for CLI display

Separates presentation text from logic (Single Responsibility).
Text is data, not code embedded in methods.
"""

from .fragments_text import (
    BASE_PROMPT,
    CHALLENGE_MODE,
    REFACTOR_MODE,
    BRAINSTORM_MODE,
    TECH_CONTEXT,
    RESEARCH_CONTEXT,
    DOCUMENTATION_CONTEXT,
    SECURITY_CONTEXT,
    RED_FLAGS_CONTEXT,
    PROJECT_CONTEXT_HEADER,
)

__all__ = [
    'BASE_PROMPT', 'CHALLENGE_MODE', 'REFACTOR_MODE', 'BRAINSTORM_MODE',
    'TECH_CONTEXT', 'RESEARCH_CONTEXT', 'DOCUMENTATION_CONTEXT',
    'SECURITY_CONTEXT', 'RED_FLAGS_CONTEXT', 'PROJECT_CONTEXT_HEADER',
]
