"""
Tests for services/order_service/pricing.py -- cart line ordering and totals.
"""

import random

import pytest

from services.order_service.domain import CartItem
from services.order_service.pricing import compare_items, sort_items, total_amount


def _items(*pairs):
    return [CartItem(product_id=pid, total_amount=total) for pid, total in pairs]


class TestCompareItems:
    def test_larger_total_sorts_first(self):
        small, large = _items((1, 10.0), (2, 30.0))
        assert compare_items(large, small) < 0
        assert compare_items(small, large) > 0

    def test_equal_totals_fall_back_to_product_id(self):
        first, second = _items((101, 12.0), (205, 12.0))
        assert compare_items(first, second) < 0
        assert compare_items(second, first) > 0

    def test_identical_lines_compare_equal(self):
        a, b = _items((7, 3.5), (7, 3.5))
        assert compare_items(a, b) == 0


class TestSortItems:
    def test_customer_cart_is_sorted_descending(self):
        items = _items((101, 25.5), (102, 10.3 * 2), (103, 16.8 * 3))
        ordered = sort_items(items)
        assert [i.product_id for i in ordered] == [103, 101, 102]
        assert [i.total_amount for i in ordered] == pytest.approx([50.4, 25.5, 20.6])

    def test_order_is_independent_of_input_order(self):
        items = _items((1, 5.0), (2, 9.0), (3, 5.0), (4, 1.0), (5, 9.0))
        expected = [2, 5, 1, 3, 4]
        for seed in range(10):
            shuffled = list(items)
            random.Random(seed).shuffle(shuffled)
            assert [i.product_id for i in sort_items(shuffled)] == expected

    def test_empty_cart(self):
        assert sort_items([]) == []


class TestTotalAmount:
    def test_sums_line_totals(self):
        items = _items((101, 25.5), (102, 10.3 * 2), (103, 16.8 * 3))
        assert total_amount(items) == pytest.approx(96.5)

    def test_summation_order_does_not_change_result(self):
        items = _items((1, 0.1), (2, 0.2), (3, 0.3), (4, 1e16), (5, -1e16))
        assert total_amount(items) == total_amount(list(reversed(items)))

    def test_no_items_totals_zero(self):
        assert total_amount([]) == 0.0
