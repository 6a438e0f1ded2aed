"""
Work Types — Data-driven decision table

Single source of truth for the menu flow:
- Which fragments each work type implies
- Whether the tech-stack step (and thus project context) is offered
- Which optional contexts are withheld for the work type

The compose flow consults this table; it never branches per work type.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from . import fragments as f


# Optional contexts offered by the additional-context step, in menu order
OPTIONAL_CONTEXTS: Tuple[str, ...] = (f.RESEARCH, f.DOCUMENTATION, f.SECURITY, f.RED_FLAGS)

# Fixed question order for the custom builder (base is always included)
CUSTOM_CHOICES: Tuple[str, ...] = (
    f.CHALLENGE,
    f.REFACTOR,
    f.BRAINSTORM,
    f.TECH,
    f.RESEARCH,
    f.DOCUMENTATION,
    f.SECURITY,
    f.RED_FLAGS,
)

CUSTOM = "custom"


@dataclass(frozen=True)
class WorkType:
    """One row of the decision table."""
    key: str
    label: str
    fragments: Tuple[str, ...]
    offers_tech_stack: bool = False
    withheld: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_custom(self) -> bool:
        return self.key == CUSTOM

    def withholds(self, fragment_id: str) -> bool:
        return fragment_id in self.withheld


WORK_TYPES: List[WorkType] = [
    WorkType("code-review", "Code review",
             (f.BASE, f.CHALLENGE), offers_tech_stack=True),
    WorkType("refactoring", "Refactoring",
             (f.BASE, f.REFACTOR, f.RED_FLAGS), offers_tech_stack=True,
             withheld=frozenset({f.RED_FLAGS})),
    WorkType("brainstorming", "Brainstorming",
             (f.BASE, f.BRAINSTORM), offers_tech_stack=True),
    WorkType("research", "Research",
             (f.BASE, f.CHALLENGE, f.RESEARCH),
             withheld=frozenset({f.RESEARCH})),
    WorkType("documentation", "Documentation",
             (f.BASE, f.DOCUMENTATION), offers_tech_stack=True,
             withheld=frozenset({f.DOCUMENTATION})),
    WorkType("security-review", "Security review",
             (f.BASE, f.CHALLENGE, f.SECURITY), offers_tech_stack=True,
             withheld=frozenset({f.RESEARCH, f.SECURITY})),
    WorkType("general", "General",
             (f.BASE,)),
    WorkType(CUSTOM, "Custom combination",
             (f.BASE,)),
]

_BY_KEY: Dict[str, WorkType] = {wt.key: wt for wt in WORK_TYPES}


def work_type_keys() -> List[str]:
    return [wt.key for wt in WORK_TYPES]


def get_work_type(key: str) -> WorkType:
    """Look up a work type by key. Raises KeyError for unknown keys."""
    if key not in _BY_KEY:
        raise KeyError(f"Unknown work type: {key}. Available: {', '.join(_BY_KEY)}")
    return _BY_KEY[key]


def parse_work_type(answer: str) -> Optional[WorkType]:
    """
    Interpret a menu answer as a work type.

    Accepts the 1-based menu number or the key (case-insensitive).
    Returns None for anything else so the caller can re-prompt.
    """
    answer = (answer or "").strip().lower()
    if not answer:
        return None
    if answer.isdecimal():
        index = int(answer) - 1
        if 0 <= index < len(WORK_TYPES):
            return WORK_TYPES[index]
        return None
    return _BY_KEY.get(answer)
