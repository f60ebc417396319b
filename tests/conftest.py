"""Shared fixtures: the fixture directory, order storage and a wired service."""
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from services.directory_service.repository import DirectoryRepository
from services.directory_service.schemas import (
    CartItemResponse,
    CustomerCardResponse,
    CustomerResponse,
)
from services.order_service.domain import CartItem, Customer, OrderDraft, PaymentCard
from services.order_service.lookups import InMemoryDirectory
from services.order_service.repository import InMemoryOrderRepository
from services.order_service.service import OrderService

ZONE = ZoneInfo("America/Sao_Paulo")


def make_service(directory, repository, lookup_timeout: float = 1.0, **overrides) -> OrderService:
    """Wires one directory into every lookup port unless a port is overridden."""
    return OrderService(
        customers=overrides.get("customers", directory),
        cards=overrides.get("cards", directory),
        carts=overrides.get("carts", directory),
        payments=overrides.get("payments", directory),
        repository=repository,
        lookup_timeout=lookup_timeout,
        zone=ZONE,
    )


def make_draft(valid_payment: bool = False) -> OrderDraft:
    return OrderDraft(
        customer=Customer(customer_id=1, full_name="Gael Alves"),
        card=PaymentCard(long_num="5172563238920845"),
        items=(
            CartItem(product_id=103, total_amount=50.4),
            CartItem(product_id=101, total_amount=25.5),
            CartItem(product_id=102, total_amount=20.6),
        ),
        total_amount=96.5,
        created_at=datetime(2024, 3, 10, 15, 30, 0, tzinfo=ZONE),
        valid_payment=valid_payment,
    )


@pytest.fixture
def directory():
    return InMemoryDirectory()


@pytest.fixture
def unpaid_directory():
    """Customer 7 has a card and a cart but no payment record."""
    return InMemoryDirectory(
        DirectoryRepository(
            customers=[CustomerResponse(id=7, first_name="Rui", last_name="Costa")],
            cards=[CustomerCardResponse(customer_id=7, long_num="4024007183412345")],
            cart_items=[CartItemResponse(customer_id=7, product_id=201, quantity=4, unit_price=2.5)],
            payments={},
        )
    )


@pytest.fixture
def repository():
    return InMemoryOrderRepository(zone=ZONE)


@pytest.fixture
def service(directory, repository):
    return make_service(directory, repository)
