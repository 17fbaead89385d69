"""Tests for the selector deriver."""

import pytest

from grid_inner.css import classify, matches
from grid_inner.model import NamedSelector, NamedSelectorSet, SelectorRole, Specificity
from grid_inner.selectors import CONSTRUCTION, dependencies, derive_selectors, raw_selectors

R = SelectorRole


def _members(cols: int, count: int) -> dict[SelectorRole, list[int]]:
    """Map each role to the 1-based positions it matches among *count* items."""
    cells = classify(derive_selectors(cols), count)
    return {
        role: [pos for pos, roles in enumerate(cells, start=1) if role in roles]
        for role in SelectorRole
    }


# ---------------------------------------------------------------------------
# Selector text
# ---------------------------------------------------------------------------


class TestSelectorText:
    def test_three_columns(self):
        s = derive_selectors(3)
        assert s.selector(R.ALL_ITEMS) == ":nth-child(n)"
        assert s.selector(R.FIRST_COL) == ":nth-child(3n + 1)"
        assert s.selector(R.LAST_COL) == ":nth-child(3n+3)"
        assert s.selector(R.FIRST_ROW) == ":nth-child(-n + 3)"
        assert s.selector(R.FIRST_IN_LAST_ROW) == ":nth-child(3n + 1):nth-last-child(-n + 3)"
        assert s.selector(R.OTHERS_IN_LAST_ROW) == ":nth-child(3n + 1):nth-last-child(-n + 3) ~ *"
        assert s.selector(R.LAST_IF_NOT_LAST_COL) == ":last-child:not(:nth-child(3n+3))"
        assert s.selector(R.PENULTIMATE_ROW_OVERHANGS) == (
            ":nth-last-child(-n + 3)"
            ":not(:nth-child(3n + 1):nth-last-child(-n + 3))"
            ":not(:nth-child(3n + 1):nth-last-child(-n + 3) ~ *)"
        )
        assert s.selector(R.PENULTIMATE_ROW_OVERHANG_LAST_COL) == (
            s.selector(R.PENULTIMATE_ROW_OVERHANGS) + ":nth-child(3n+3)"
        )

    def test_helper_is_not_a_role(self):
        assert raw_selectors(4)["lastXInGrid"] == ":nth-last-child(-n + 4)"
        assert len(derive_selectors(4)) == 9

    def test_single_column_keeps_first_and_last_col_distinct(self):
        s = derive_selectors(1)
        assert s.selector(R.FIRST_COL) == ":nth-child(1n + 1)"
        assert s.selector(R.LAST_COL) == ":nth-child(1n+1)"
        assert s[R.FIRST_COL] != s[R.LAST_COL]

    def test_rejects_non_positive_columns(self):
        with pytest.raises(ValueError):
            derive_selectors(0)


class TestSpecificities:
    def test_raw_specificities(self):
        s = derive_selectors(5)
        classes = {role: s[role].specificity.classes for role in s}
        assert classes == {
            R.ALL_ITEMS: 1,
            R.FIRST_ROW: 1,
            R.FIRST_IN_LAST_ROW: 2,
            R.OTHERS_IN_LAST_ROW: 2,
            R.FIRST_COL: 1,
            R.LAST_COL: 1,
            R.LAST_IF_NOT_LAST_COL: 2,
            R.PENULTIMATE_ROW_OVERHANGS: 5,
            R.PENULTIMATE_ROW_OVERHANG_LAST_COL: 6,
        }

    @pytest.mark.parametrize("cols", [1, 2, 7, 12, 40])
    def test_shapes_independent_of_columns(self, cols):
        assert {r: e.specificity for r, e in derive_selectors(cols).items()} == {
            r: e.specificity for r, e in derive_selectors(1).items()
        }


# ---------------------------------------------------------------------------
# Construction list
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_dependencies(self):
        assert dependencies("firstInLastRow") == ("firstCol", "lastXInGrid")
        assert dependencies("penultimateRowOverhangs") == (
            "lastXInGrid",
            "firstInLastRow",
            "othersInLastRow",
        )
        assert dependencies("firstCol") == ()

    def test_dependencies_precede_dependents(self):
        names = [name for name, _ in CONSTRUCTION]
        for name in names:
            for dep in dependencies(name):
                assert names.index(dep) < names.index(name)

    def test_every_role_is_constructed(self):
        names = {name for name, _ in CONSTRUCTION}
        assert {role.value for role in SelectorRole} <= names


class TestNamedSelectorSet:
    def test_iterates_in_role_order(self):
        assert list(derive_selectors(2)) == list(SelectorRole)

    def test_missing_role_rejected(self):
        entry = NamedSelector(role=R.ALL_ITEMS, selector="*", specificity=Specificity())
        with pytest.raises(ValueError, match="Missing"):
            NamedSelectorSet([entry])

    def test_duplicate_role_rejected(self):
        entries = list(derive_selectors(2).values())
        with pytest.raises(ValueError, match="Duplicate"):
            NamedSelectorSet(entries + [entries[0]])


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class TestGeometry:
    def test_three_columns_eight_items(self):
        m = _members(3, 8)
        assert m[R.ALL_ITEMS] == list(range(1, 9))
        assert m[R.FIRST_ROW] == [1, 2, 3]
        assert m[R.FIRST_COL] == [1, 4, 7]
        assert m[R.LAST_COL] == [3, 6]
        assert m[R.FIRST_IN_LAST_ROW] == [7]
        assert m[R.OTHERS_IN_LAST_ROW] == [8]
        assert m[R.LAST_IF_NOT_LAST_COL] == [8]
        assert m[R.PENULTIMATE_ROW_OVERHANGS] == [6]
        assert m[R.PENULTIMATE_ROW_OVERHANG_LAST_COL] == [6]

    def test_three_columns_seven_items(self):
        m = _members(3, 7)
        assert m[R.FIRST_IN_LAST_ROW] == [7]
        assert m[R.OTHERS_IN_LAST_ROW] == []
        assert m[R.PENULTIMATE_ROW_OVERHANGS] == [5, 6]
        assert m[R.PENULTIMATE_ROW_OVERHANG_LAST_COL] == [6]
        assert m[R.LAST_IF_NOT_LAST_COL] == [7]

    def test_full_grid_has_no_overhangs(self):
        m = _members(3, 9)
        assert m[R.FIRST_IN_LAST_ROW] == [7]
        assert m[R.OTHERS_IN_LAST_ROW] == [8, 9]
        assert m[R.PENULTIMATE_ROW_OVERHANGS] == []
        assert m[R.LAST_IF_NOT_LAST_COL] == []

    def test_fewer_items_than_columns(self):
        m = _members(4, 2)
        assert m[R.FIRST_ROW] == [1, 2]
        assert m[R.FIRST_IN_LAST_ROW] == [1]
        assert m[R.OTHERS_IN_LAST_ROW] == [2]
        assert m[R.PENULTIMATE_ROW_OVERHANGS] == []
        assert m[R.LAST_IF_NOT_LAST_COL] == [2]

    def test_single_column(self):
        m = _members(1, 4)
        assert m[R.FIRST_COL] == m[R.LAST_COL] == [1, 2, 3, 4]
        assert m[R.FIRST_ROW] == [1]
        assert m[R.FIRST_IN_LAST_ROW] == [4]
        assert m[R.OTHERS_IN_LAST_ROW] == []
        assert m[R.LAST_IF_NOT_LAST_COL] == []
        assert m[R.PENULTIMATE_ROW_OVERHANGS] == []
        assert m[R.PENULTIMATE_ROW_OVERHANG_LAST_COL] == []

    @pytest.mark.parametrize("cols", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("count", [1, 2, 5, 6, 11, 13])
    def test_overhangs_are_cells_with_nothing_below(self, cols, count):
        m = _members(cols, count)
        # A cell overhangs when it is not in the last row and the cell below it is missing.
        last_row_start = count - (count - 1) % cols
        expected = [p for p in range(1, last_row_start) if p + cols > count]
        assert m[R.PENULTIMATE_ROW_OVERHANGS] == expected

    @pytest.mark.parametrize("cols", [2, 3, 4])
    def test_last_row_rules_cover_exactly_the_last_row(self, cols):
        for count in range(1, 3 * cols + 1):
            m = _members(cols, count)
            last_row_start = count - (count - 1) % cols
            last_row = list(range(last_row_start, count + 1))
            assert m[R.FIRST_IN_LAST_ROW] + m[R.OTHERS_IN_LAST_ROW] == last_row

    def test_matcher_agrees_with_role_selector(self):
        s = derive_selectors(2)
        assert matches(s.selector(R.LAST_COL), 4, 5)
        assert not matches(s.selector(R.LAST_COL), 5, 5)
