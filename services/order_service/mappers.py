"""Conversions between the directory, core and storage shapes of an order."""
from datetime import datetime
from zoneinfo import ZoneInfo

from services.directory_service.schemas import (
    CartItemResponse,
    CustomerCardResponse,
    CustomerResponse,
)
from .domain import CartItem, Customer, OrderDraft, PaymentCard, PersistedOrder
from .models import OrderItemRecord, OrderRecord


# --- Directory -> core ---

def customer_from_response(response: CustomerResponse) -> Customer:
    return Customer(
        customer_id=response.id,
        full_name=f"{response.first_name} {response.last_name}",
    )

def card_from_response(response: CustomerCardResponse) -> PaymentCard:
    return PaymentCard(long_num=response.long_num)

def cart_item_from_response(response: CartItemResponse) -> CartItem:
    return CartItem(
        product_id=response.product_id,
        total_amount=response.unit_price * response.quantity,
    )


# --- Core -> core ---

def persisted_from_draft(order_id: str, draft: OrderDraft, zone: ZoneInfo) -> PersistedOrder:
    return PersistedOrder(
        order_id=order_id,
        customer=draft.customer,
        card=draft.card,
        items=draft.items,
        registration_date=draft.created_at.astimezone(zone),
        total_amount=draft.total_amount,
        valid_payment=draft.valid_payment,
    )


# --- Core <-> storage ---

def record_from_persisted(order: PersistedOrder) -> OrderRecord:
    # Stored as naive local time in the order zone
    return OrderRecord(
        id=order.order_id,
        customer_id=order.customer.customer_id,
        customer_name=order.customer.full_name,
        card_number=order.card.long_num,
        registration_date=order.registration_date.replace(tzinfo=None),
        total=order.total_amount,
        valid_payment=order.valid_payment,
        items=[
            OrderItemRecord(position=position, product_id=item.product_id, total_amount=item.total_amount)
            for position, item in enumerate(order.items)
        ],
    )

def persisted_from_record(record: OrderRecord, zone: ZoneInfo) -> PersistedOrder:
    registration_date: datetime = record.registration_date
    return PersistedOrder(
        order_id=record.id,
        customer=Customer(customer_id=record.customer_id, full_name=record.customer_name),
        card=PaymentCard(long_num=record.card_number),
        items=tuple(
            CartItem(product_id=item.product_id, total_amount=item.total_amount)
            for item in sorted(record.items, key=lambda i: i.position)
        ),
        registration_date=registration_date.replace(tzinfo=zone),
        total_amount=record.total,
        valid_payment=record.valid_payment,
    )
