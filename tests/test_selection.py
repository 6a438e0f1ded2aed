"""
Tests for Selection — ordered, duplicate-free accumulation of fragment ids
"""

import pytest

from primer.core.fragments import Fragment, FragmentLibrary, UnknownFragmentError
from primer.core.selection import Selection


@pytest.fixture
def tiny_library():
    return FragmentLibrary([
        Fragment("a", "A", "", "alpha\n"),
        Fragment("b", "B", "", "beta\n"),
        Fragment("c", "C", "", "gamma\n"),
    ])


class TestAdd:
    """add() appends once and ignores repeats."""

    def test_add_new_id_returns_true(self):
        selection = Selection()
        assert selection.add("a") is True
        assert selection.ids == ("a",)

    def test_duplicate_add_is_noop(self):
        selection = Selection()
        selection.add("a")
        assert selection.add("a") is False
        assert selection.ids == ("a",)

    def test_add_twice_equals_add_once(self):
        once = Selection()
        once.add("a")
        twice = Selection()
        twice.add("a")
        twice.add("a")
        assert once == twice

    def test_order_is_first_insertion(self):
        selection = Selection()
        for fragment_id in ["b", "a", "b", "c", "a"]:
            selection.add(fragment_id)
        assert selection.ids == ("b", "a", "c")

    def test_constructor_deduplicates(self):
        assert Selection(["a", "a", "b"]).ids == ("a", "b")


class TestContains:
    """contains() and the in operator agree."""

    def test_contains(self):
        selection = Selection(["a"])
        assert selection.contains("a")
        assert "a" in selection
        assert not selection.contains("b")
        assert "b" not in selection

    def test_len_and_iter(self):
        selection = Selection(["a", "b"])
        assert len(selection) == 2
        assert list(selection) == ["a", "b"]


class TestRender:
    """render() concatenates bodies in insertion order."""

    def test_render_in_insertion_order(self, tiny_library):
        selection = Selection(["c", "a"])
        assert selection.render(tiny_library) == "gamma\nalpha\n"

    def test_render_empty(self, tiny_library):
        assert Selection().render(tiny_library) == ""

    def test_render_unknown_id_raises(self, tiny_library):
        selection = Selection(["a", "zzz"])
        with pytest.raises(UnknownFragmentError):
            selection.render(tiny_library)
