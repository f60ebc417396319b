import math
from functools import cmp_to_key
from typing import Iterable

from .domain import CartItem


def compare_items(item1: CartItem, item2: CartItem) -> int:
    """Orders cart lines by total, largest first; equal totals by product id."""
    if item2.total_amount > item1.total_amount:
        return 1
    if item2.total_amount < item1.total_amount:
        return -1
    return (item1.product_id > item2.product_id) - (item1.product_id < item2.product_id)


def sort_items(items: Iterable[CartItem]) -> list[CartItem]:
    return sorted(items, key=cmp_to_key(compare_items))


def total_amount(items: Iterable[CartItem]) -> float:
    # fsum is exact up to the final rounding, so summation order is irrelevant
    return math.fsum(item.total_amount for item in items)
