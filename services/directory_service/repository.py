"""
Fixture-backed upstream data: customers, cards, cart lines and payment
status, keyed by customer id. Every read returns None (or an empty list for
carts) on a miss; callers decide what a miss means.
"""
from .schemas import (
    CartItemResponse,
    CustomerCardResponse,
    CustomerResponse,
    PaymentStatusResponse,
)

CUSTOMERS = [
    CustomerResponse(id=1, first_name="Gael", last_name="Alves"),
    CustomerResponse(id=2, first_name="Edson", last_name="Brito"),
    CustomerResponse(id=3, first_name="Elaine", last_name="Teixeira"),
    CustomerResponse(id=4, first_name="Stella", last_name="Paz"),
]

CUSTOMER_CARDS = [
    CustomerCardResponse(customer_id=1, long_num="5172563238920845"),
    CustomerCardResponse(customer_id=2, long_num="5585470523496195"),
    CustomerCardResponse(customer_id=3, long_num="4916563711189276"),
]

CART_ITEMS = [
    CartItemResponse(customer_id=1, product_id=101, quantity=1, unit_price=25.5),
    CartItemResponse(customer_id=1, product_id=102, quantity=2, unit_price=10.3),
    CartItemResponse(customer_id=1, product_id=103, quantity=3, unit_price=16.8),
    CartItemResponse(customer_id=2, product_id=101, quantity=2, unit_price=25.5),
    CartItemResponse(customer_id=2, product_id=102, quantity=5, unit_price=10.3),
]

CUSTOMER_PAYMENTS = {1: True, 2: False}


class DirectoryRepository:
    def __init__(
        self,
        customers: list[CustomerResponse] | None = None,
        cards: list[CustomerCardResponse] | None = None,
        cart_items: list[CartItemResponse] | None = None,
        payments: dict[int, bool] | None = None,
    ):
        customers = CUSTOMERS if customers is None else customers
        cards = CUSTOMER_CARDS if cards is None else cards
        cart_items = CART_ITEMS if cart_items is None else cart_items
        payments = CUSTOMER_PAYMENTS if payments is None else payments

        self._customers = {c.id: c for c in customers}
        self._cards = {c.customer_id: c for c in cards}
        self._cart_items: dict[int, list[CartItemResponse]] = {}
        for item in cart_items:
            self._cart_items.setdefault(item.customer_id, []).append(item)
        self._payments = dict(payments)

    def get_customer(self, customer_id: int) -> CustomerResponse | None:
        return self._customers.get(customer_id)

    def get_card(self, customer_id: int) -> CustomerCardResponse | None:
        return self._cards.get(customer_id)

    def get_cart_items(self, customer_id: int) -> list[CartItemResponse]:
        return list(self._cart_items.get(customer_id, []))

    def get_payment_status(self, customer_id: int) -> PaymentStatusResponse | None:
        if customer_id not in self._payments:
            return None
        return PaymentStatusResponse(
            customer_id=customer_id, valid_payment=self._payments[customer_id]
        )
