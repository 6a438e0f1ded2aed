"""
Tests for the work-type decision table

The table is data, so these tests check the data directly.
"""

import pytest

from primer.core.worktypes import (
    WORK_TYPES,
    OPTIONAL_CONTEXTS,
    CUSTOM_CHOICES,
    get_work_type,
    parse_work_type,
    work_type_keys,
)


EXPECTED_FRAGMENTS = {
    "code-review": ("base", "challenge"),
    "refactoring": ("base", "refactor", "red-flags"),
    "brainstorming": ("base", "brainstorm"),
    "research": ("base", "challenge", "research"),
    "documentation": ("base", "documentation"),
    "security-review": ("base", "challenge", "security"),
    "general": ("base",),
    "custom": ("base",),
}


class TestTable:
    """Implied fragments and step eligibility per work type."""

    def test_menu_order(self):
        assert work_type_keys() == [
            "code-review", "refactoring", "brainstorming", "research",
            "documentation", "security-review", "general", "custom",
        ]

    @pytest.mark.parametrize("key,expected", sorted(EXPECTED_FRAGMENTS.items()))
    def test_implied_fragments(self, key, expected):
        assert get_work_type(key).fragments == expected

    def test_tech_stack_offered_for_five_types(self):
        offered = {wt.key for wt in WORK_TYPES if wt.offers_tech_stack}
        assert offered == {"code-review", "refactoring", "brainstorming",
                           "documentation", "security-review"}

    def test_withheld_contexts(self):
        assert get_work_type("research").withheld == {"research"}
        assert get_work_type("security-review").withheld == {"research", "security"}
        assert get_work_type("documentation").withheld == {"documentation"}
        assert get_work_type("refactoring").withheld == {"red-flags"}
        assert get_work_type("general").withheld == set()

    def test_only_custom_is_custom(self):
        assert [wt.key for wt in WORK_TYPES if wt.is_custom] == ["custom"]

    def test_optional_and_custom_orders(self):
        assert OPTIONAL_CONTEXTS == ("research", "documentation", "security", "red-flags")
        assert CUSTOM_CHOICES == ("challenge", "refactor", "brainstorm", "tech-context",
                                  "research", "documentation", "security", "red-flags")

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            get_work_type("poetry")


class TestParseWorkType:
    """Menu answers: number or key, anything else is None."""

    def test_by_number(self):
        assert parse_work_type("2").key == "refactoring"
        assert parse_work_type(" 8 ").key == "custom"

    def test_by_key_case_insensitive(self):
        assert parse_work_type("Security-Review").key == "security-review"

    @pytest.mark.parametrize("answer", ["", "0", "9", "-1", "x", "1.5", "²", None])
    def test_invalid(self, answer):
        assert parse_work_type(answer) is None
