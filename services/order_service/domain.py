"""Core entities of an order submission."""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class OrderState(str, Enum):
    """Where a submission stands in the pipeline."""

    START = "start"
    CUSTOMER_RESOLVED = "customer_resolved"
    CARD_AND_ITEMS_JOINED = "card_and_items_joined"
    TOTALED = "totaled"
    PERSISTED = "persisted"
    VALIDITY_RESOLVED = "validity_resolved"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass(frozen=True)
class Customer:
    customer_id: int
    full_name: str


@dataclass(frozen=True)
class PaymentCard:
    long_num: str


@dataclass(frozen=True)
class CartItem:
    """A cart line. `total_amount` is unit price times quantity, fixed at fetch."""

    product_id: int
    total_amount: float


@dataclass(frozen=True)
class OrderDraft:
    """An assembled order that has not been stored yet.

    Attributes:
        customer: The resolved buyer.
        card: The buyer's payment card.
        items: Cart lines in their final (sorted) order; never empty.
        total_amount: Sum of the item totals.
        created_at: Zoned time the draft was built.
        valid_payment: Provisional flag, always False until the follow-up update.
    """

    customer: Customer
    card: PaymentCard
    items: tuple[CartItem, ...]
    total_amount: float
    created_at: datetime
    valid_payment: bool = False


@dataclass(frozen=True)
class PersistedOrder:
    order_id: str
    customer: Customer
    card: PaymentCard
    items: tuple[CartItem, ...]
    registration_date: datetime
    total_amount: float
    valid_payment: bool
