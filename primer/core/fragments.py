"""
Fragments — Named, immutable blocks of prompt text

The catalog is fixed at startup. Sessions that synthesize a fragment
(project context) get a derived library; the catalog itself never changes.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from ..content import (
    BASE_PROMPT,
    CHALLENGE_MODE,
    REFACTOR_MODE,
    BRAINSTORM_MODE,
    TECH_CONTEXT,
    RESEARCH_CONTEXT,
    DOCUMENTATION_CONTEXT,
    SECURITY_CONTEXT,
    RED_FLAGS_CONTEXT,
)


# Stable fragment ids
BASE = "base"
CHALLENGE = "challenge"
REFACTOR = "refactor"
BRAINSTORM = "brainstorm"
TECH = "tech-context"
RESEARCH = "research"
DOCUMENTATION = "documentation"
SECURITY = "security"
RED_FLAGS = "red-flags"
PROJECT_CONTEXT = "project-context"


class UnknownFragmentError(KeyError):
    """Raised when a fragment id is not in the library."""

    def __init__(self, fragment_id: str, available: List[str]):
        self.fragment_id = fragment_id
        self.available = available
        super().__init__(fragment_id)

    def __str__(self) -> str:
        return f"Unknown fragment: {self.fragment_id}. Available: {', '.join(self.available)}"


@dataclass(frozen=True)
class Fragment:
    """A named block of instructional text."""
    id: str
    title: str
    description: str
    body: str


CATALOG: List[Fragment] = [
    Fragment(BASE, "Base prompt",
             "Core collaboration instructions", BASE_PROMPT),
    Fragment(CHALLENGE, "Challenge mode",
             "Push back on assumptions and find gaps", CHALLENGE_MODE),
    Fragment(REFACTOR, "Refactor mode",
             "Behavior-preserving, stepwise improvements", REFACTOR_MODE),
    Fragment(BRAINSTORM, "Brainstorm mode",
             "Explore several options before committing", BRAINSTORM_MODE),
    Fragment(TECH, "Tech stack context",
             "Language and tooling conventions", TECH_CONTEXT),
    Fragment(RESEARCH, "Research context",
             "Facts vs inference, sources, open questions", RESEARCH_CONTEXT),
    Fragment(DOCUMENTATION, "Documentation context",
             "Audience-first, example-driven writing", DOCUMENTATION_CONTEXT),
    Fragment(SECURITY, "Security context",
             "Trust boundaries, vulnerabilities, mitigations", SECURITY_CONTEXT),
    Fragment(RED_FLAGS, "Red flags",
             "Warning signs to call out in the code", RED_FLAGS_CONTEXT),
]


class FragmentLibrary:
    """Catalog of fragments with lookup by id, in catalog order."""

    def __init__(self, fragments: Optional[List[Fragment]] = None):
        self._fragments: Dict[str, Fragment] = {}
        for fragment in (CATALOG if fragments is None else fragments):
            self._fragments[fragment.id] = fragment

    def get(self, fragment_id: str) -> Fragment:
        """Return fragment by id, or raise UnknownFragmentError."""
        try:
            return self._fragments[fragment_id]
        except KeyError:
            raise UnknownFragmentError(fragment_id, self.ids()) from None

    def ids(self) -> List[str]:
        return list(self._fragments.keys())

    def with_fragment(self, fragment: Fragment) -> 'FragmentLibrary':
        """Return a new library that also holds `fragment` (replacing same id)."""
        fragments = [f for f in self._fragments.values() if f.id != fragment.id]
        fragments.append(fragment)
        return FragmentLibrary(fragments)

    def __contains__(self, fragment_id: str) -> bool:
        return fragment_id in self._fragments

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments.values())

    def __len__(self) -> int:
        return len(self._fragments)


_default_library: Optional[FragmentLibrary] = None


def get_library() -> FragmentLibrary:
    """Get the shared static catalog (created on first use)."""
    global _default_library
    if _default_library is None:
        _default_library = FragmentLibrary()
    return _default_library
