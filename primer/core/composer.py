"""
Composer — Pure prompt composition

Everything the interactive flow decides ends up here as plain values:
work type, tech choice, additional contexts, project fields, custom
choices and the question. compose_prompt() turns them into text without
touching the console, so each step is testable on its own.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from . import fragments as f
from .fragments import Fragment, FragmentLibrary, get_library
from .selection import Selection
from .worktypes import OPTIONAL_CONTEXTS, CUSTOM_CHOICES, WorkType, get_work_type
from ..content import PROJECT_CONTEXT_HEADER


QUESTION_SEPARATOR = "\n---\n\n"
NONE_SENTINEL = "none"


@dataclass(frozen=True)
class ProjectField:
    """One free-text sub-field of the project context."""
    key: str
    label: str
    prompt: str


PROJECT_FIELDS: Tuple[ProjectField, ...] = (
    ProjectField("architecture", "Architecture", "Architecture (e.g. monolith, microservices, layers)"),
    ProjectField("libraries", "Key libraries", "Key libraries and frameworks"),
    ProjectField("database", "Database", "Database and storage"),
    ProjectField("patterns", "Patterns to follow", "Patterns the code follows"),
    ProjectField("anti-patterns", "Anti-patterns to avoid", "Anti-patterns to avoid"),
    ProjectField("tooling", "Tooling", "Build, test and lint tooling"),
)

PROJECT_FIELD_KEYS: Tuple[str, ...] = tuple(pf.key for pf in PROJECT_FIELDS)


@dataclass
class Session:
    """Transient state for one run. Never persisted."""
    work_type: WorkType
    tech_context: bool = False
    selection: Selection = field(default_factory=Selection)
    project_fragment: Optional[Fragment] = None
    question: str = ""

    @classmethod
    def start(cls, work_type: WorkType) -> 'Session':
        """Create a session seeded with the work type's implied fragments."""
        return cls(work_type=work_type, selection=Selection(work_type.fragments))

    def library(self, base: Optional[FragmentLibrary] = None) -> FragmentLibrary:
        """Fragment library for rendering, including any synthesized fragment."""
        library = get_library() if base is None else base
        if self.project_fragment is not None:
            library = library.with_fragment(self.project_fragment)
        return library

    def render(self, base: Optional[FragmentLibrary] = None) -> str:
        """Rendered fragments followed by the question block."""
        return append_question(self.selection.render(self.library(base)), self.question)


# =============================================================================
# Step Helpers
# =============================================================================

def offers_project_context(session: Session) -> bool:
    """Project context is only asked after choosing the tech-stack context."""
    return session.work_type.offers_tech_stack and session.tech_context


def choose_tech_context(session: Session, use_tech: bool) -> None:
    """Record the tech-stack answer on the session and select the fragment."""
    if not session.work_type.offers_tech_stack:
        return
    session.tech_context = use_tech
    if use_tech:
        session.selection.add(f.TECH)


def available_contexts(work_type: WorkType, selection: Selection) -> List[str]:
    """Optional contexts still worth offering, in menu order."""
    if work_type.is_custom:
        return []
    return [
        fragment_id for fragment_id in OPTIONAL_CONTEXTS
        if fragment_id not in selection and not work_type.withholds(fragment_id)
    ]


def parse_index_selection(answer: str, count: int) -> List[int]:
    """
    Parse a comma-separated list of 1-based indices.

    Empty input or "none" selects nothing. Each token is judged on its own:
    non-numeric, out-of-range and repeated tokens are dropped.

    Returns:
        0-based indices in the order first given
    """
    answer = (answer or "").strip()
    if not answer or answer.lower() == NONE_SENTINEL:
        return []

    chosen: List[int] = []
    for token in answer.split(","):
        token = token.strip()
        if not token.isdecimal():
            continue
        index = int(token) - 1
        if 0 <= index < count and index not in chosen:
            chosen.append(index)
    return chosen


def build_project_context(values: Dict[str, str]) -> Optional[Fragment]:
    """
    Synthesize the project-context fragment from free-text fields.

    Blank fields are left out. Returns None when every field is blank.
    """
    bullets = []
    for project_field in PROJECT_FIELDS:
        value = (values.get(project_field.key) or "").strip()
        if value:
            bullets.append(f"- {project_field.label}: {value}\n")

    if not bullets:
        return None

    return Fragment(
        id=f.PROJECT_CONTEXT,
        title="Project context",
        description="Details about this specific codebase",
        body=PROJECT_CONTEXT_HEADER + "".join(bullets),
    )


def add_project_context(session: Session, values: Dict[str, str]) -> bool:
    """Attach a project-context fragment if any field is filled in."""
    fragment = build_project_context(values)
    if fragment is None:
        return False
    session.project_fragment = fragment
    session.selection.add(fragment.id)
    return True


def append_question(text: str, question: str) -> str:
    """Append the question block unless the question is blank."""
    question = (question or "").strip()
    if not question:
        return text
    return text + QUESTION_SEPARATOR + question


# =============================================================================
# Composition
# =============================================================================

@dataclass
class ComposedPrompt:
    """Result of a composition: the text plus the selection behind it."""
    text: str
    selection: Tuple[str, ...]
    work_type: str
    skipped: List[str] = field(default_factory=list)


def compose_prompt(
    work_type: str,
    tech_context: bool = False,
    contexts: Iterable[str] = (),
    project: Optional[Dict[str, str]] = None,
    custom: Iterable[str] = (),
    question: str = "",
    library: Optional[FragmentLibrary] = None,
) -> ComposedPrompt:
    """
    Compose a prompt from answers, without any console I/O.

    Args:
        work_type: Work type key (see WORK_TYPES)
        tech_context: Tech-stack answer (ignored where not offered)
        contexts: Additional context ids (ineligible ones are skipped)
        project: Project field values keyed by PROJECT_FIELD_KEYS
        custom: Fragment ids answered "yes" in the custom builder
        question: Free-text question

    Returns:
        ComposedPrompt; `skipped` lists ids that were not eligible
    """
    if library is None:
        library = get_library()
    wt = get_work_type(work_type)
    session = Session.start(wt)
    skipped: List[str] = []

    if wt.is_custom:
        chosen = set()
        for fragment_id in custom:
            library.get(fragment_id)
            if fragment_id in CUSTOM_CHOICES:
                chosen.add(fragment_id)
            elif fragment_id not in skipped:
                skipped.append(fragment_id)
        # Rendered in question order, whatever order the ids arrive in
        session.selection.extend(fid for fid in CUSTOM_CHOICES if fid in chosen)
    else:
        choose_tech_context(session, tech_context)

        offered = available_contexts(wt, session.selection)
        for fragment_id in contexts:
            library.get(fragment_id)
            if fragment_id in offered:
                session.selection.add(fragment_id)
            else:
                skipped.append(fragment_id)

        if project and offers_project_context(session):
            add_project_context(session, project)

    session.question = question
    return ComposedPrompt(
        text=session.render(library),
        selection=session.selection.ids,
        work_type=wt.key,
        skipped=skipped,
    )
