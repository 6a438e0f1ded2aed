"""
Selection — Ordered, duplicate-free set of fragment ids

Insertion order defines output order. Adding an id twice is a no-op.
"""

from typing import Iterable, Iterator, List, Tuple

from .fragments import FragmentLibrary


class Selection:
    """Accumulates fragment ids for one session."""

    def __init__(self, ids: Iterable[str] = ()):
        self._ids: List[str] = []
        self.extend(ids)

    def add(self, fragment_id: str) -> bool:
        """
        Append id unless already present.

        Returns:
            True if the id was newly added, False for a duplicate
        """
        if fragment_id in self._ids:
            return False
        self._ids.append(fragment_id)
        return True

    def extend(self, fragment_ids: Iterable[str]) -> None:
        for fragment_id in fragment_ids:
            self.add(fragment_id)

    def contains(self, fragment_id: str) -> bool:
        return fragment_id in self._ids

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(self._ids)

    def render(self, library: FragmentLibrary) -> str:
        """Concatenate fragment bodies in insertion order."""
        return "".join(library.get(fragment_id).body for fragment_id in self._ids)

    def __contains__(self, fragment_id: str) -> bool:
        return self.contains(fragment_id)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return self._ids == other._ids

    def __repr__(self) -> str:
        return f"Selection({self._ids!r})"
