"""Tests for selector specificity."""

from functools import cmp_to_key

import pytest

from grid_inner.css import calculate, compare_descending
from grid_inner.model import Specificity


class TestCalculate:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("*", (0, 0, 0)),
            ("div", (0, 0, 1)),
            (".card", (0, 1, 0)),
            ("#main", (1, 0, 0)),
            ("[href]", (0, 1, 0)),
            ("li.card#main", (1, 1, 1)),
            (":nth-child(n)", (0, 1, 0)),
            (":nth-child(n):nth-child(n):nth-child(3n + 1)", (0, 3, 0)),
            ("a::after", (0, 0, 2)),
            ("a:after", (0, 0, 2)),
            ("ul > li + li", (0, 0, 3)),
        ],
    )
    def test_basic(self, selector, expected):
        assert calculate(selector).as_tuple() == expected

    def test_where_contributes_nothing(self):
        assert calculate(":where(#main .card)") == Specificity()

    def test_not_takes_most_specific_argument(self):
        assert calculate(":not(#main, .card)") == Specificity(1, 0, 0)

    def test_is_takes_most_specific_argument(self):
        assert calculate(":is(.a .b, div)") == Specificity(0, 2, 0)

    def test_nesting_selector_is_zero(self):
        assert calculate("& > :nth-child(n)") == Specificity(0, 1, 0)
        assert calculate("&::after") == Specificity(0, 0, 1)

    def test_sibling_combinator_sums_both_sides(self):
        assert calculate(":nth-child(3n + 1):nth-last-child(-n + 3) ~ *") == Specificity(0, 2, 0)

    def test_not_with_sibling_argument(self):
        selector = ":nth-last-child(-n + 3):not(:nth-child(3n + 1):nth-last-child(-n + 3) ~ *)"
        assert calculate(selector) == Specificity(0, 3, 0)

    def test_list_returns_maximum(self):
        assert calculate(".a, #b, div") == Specificity(1, 0, 0)


class TestOrdering:
    def test_highest_component_first(self):
        assert Specificity(1, 0, 0) > Specificity(0, 9, 9)
        assert Specificity(0, 1, 0) > Specificity(0, 0, 9)

    def test_compare_descending(self):
        low, mid, high = Specificity(0, 0, 1), Specificity(0, 1, 0), Specificity(1, 0, 0)
        assert compare_descending(high, low) < 0
        assert compare_descending(low, high) > 0
        assert compare_descending(mid, Specificity(0, 1, 0)) == 0
        ordered = sorted([low, high, mid], key=cmp_to_key(compare_descending))
        assert ordered == [high, mid, low]

    def test_addition(self):
        assert Specificity(0, 1, 0) + Specificity(1, 0, 2) == Specificity(1, 1, 2)

    def test_str(self):
        assert str(Specificity(0, 6, 0)) == "(0,6,0)"
