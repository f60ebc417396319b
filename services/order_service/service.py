import asyncio
import time
from datetime import datetime
from zoneinfo import ZoneInfo

import structlog

from shared.config import settings
from shared.observability import (
    ecomm_lookup_timeouts_total,
    ecomm_order_submission_duration_seconds,
    ecomm_order_submissions_total,
)
from .domain import CartItem, OrderDraft, OrderState, PersistedOrder
from .errors import (
    CardNotFound,
    CustomerNotFound,
    EmptyCart,
    LookupTimeout,
    OrderSubmissionError,
    PaymentRecordNotFound,
    StorageInconsistency,
)
from .lookups import CardLookup, CartLookup, CustomerLookup, NotFound, PaymentValidityLookup
from .pipeline import OrderPipeline
from .pricing import sort_items, total_amount
from .repository import OrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """
    Assembles, stores and finalizes one order per `submit_order` call.

    The customer is resolved first. Card and cart are then fetched
    concurrently and joined. The draft is totaled and stored, and finally
    the payment validity is looked up and written onto the stored order.
    """

    def __init__(
        self,
        customers: CustomerLookup,
        cards: CardLookup,
        carts: CartLookup,
        payments: PaymentValidityLookup,
        repository: OrderRepository,
        lookup_timeout: float = settings.LOOKUP_TIMEOUT_SECONDS,
        zone: ZoneInfo | None = None,
    ):
        self.customers = customers
        self.cards = cards
        self.carts = carts
        self.payments = payments
        self.repository = repository
        self.lookup_timeout = lookup_timeout
        self.zone = zone or ZoneInfo(settings.ORDER_TIMEZONE)
        self.pipeline = (
            OrderPipeline()
            .add_step("resolve_customer", self._resolve_customer, OrderState.CUSTOMER_RESOLVED)
            .add_step("join_card_and_items", self._join_card_and_items, OrderState.CARD_AND_ITEMS_JOINED)
            .add_step("build_draft", self._build_draft, OrderState.TOTALED)
            .add_step("persist_order", self._persist_order, OrderState.PERSISTED)
            .add_step("resolve_payment_validity", self._resolve_payment_validity, OrderState.VALIDITY_RESOLVED)
            .add_step("update_payment_status", self._update_payment_status, OrderState.UPDATED)
        )

    async def submit_order(self, customer_id: int) -> PersistedOrder:
        start = time.perf_counter()
        log = logger.bind(customer_id=customer_id)
        log.info("order_submission_started")
        try:
            ctx = await self.pipeline.execute({"customer_id": customer_id})
        except OrderSubmissionError as e:
            ecomm_order_submissions_total.labels(outcome=e.outcome).inc()
            raise
        finally:
            ecomm_order_submission_duration_seconds.observe(time.perf_counter() - start)

        ecomm_order_submissions_total.labels(outcome="success").inc()
        order = ctx["order"]
        log.info("order_registered", order_id=order.order_id, valid_payment=order.valid_payment)
        return order

    async def get_order(self, order_id: str) -> PersistedOrder | None:
        return await self.repository.get_by_id(order_id)

    # --- STEPS ---

    async def _resolve_customer(self, ctx: dict):
        customer_id = ctx["customer_id"]
        logger.info("get_customer_by_id", customer_id=customer_id)
        result = await self._bounded("customer", self.customers.get_customer(customer_id))
        if isinstance(result, NotFound):
            raise CustomerNotFound(customer_id)
        ctx["customer"] = result.value
        logger.info("customer_found", customer_id=customer_id, full_name=result.value.full_name)

    async def _join_card_and_items(self, ctx: dict):
        customer_id = ctx["customer"].customer_id
        card_task = asyncio.create_task(self._bounded("card", self.cards.get_card(customer_id)))
        items_task = asyncio.create_task(self._bounded("cart", self._fetch_sorted_items(customer_id)))

        try:
            card, items = await asyncio.gather(card_task, items_task)
        except BaseException:
            # Neither lookup may outlive this call
            for task in (card_task, items_task):
                task.cancel()
            await asyncio.gather(card_task, items_task, return_exceptions=True)
            raise

        if isinstance(card, NotFound):
            raise CardNotFound(customer_id)
        if not items:
            raise EmptyCart(customer_id)

        logger.info("card_and_items_joined", customer_id=customer_id, item_count=len(items))
        ctx["card"] = card.value
        ctx["items"] = items

    async def _fetch_sorted_items(self, customer_id: int) -> list[CartItem]:
        logger.info("get_cart_items_by_customer_id", customer_id=customer_id)
        return sort_items(await self.carts.get_cart_items(customer_id))

    async def _build_draft(self, ctx: dict):
        items = tuple(ctx["items"])
        ctx["draft"] = OrderDraft(
            customer=ctx["customer"],
            card=ctx["card"],
            items=items,
            total_amount=total_amount(items),
            created_at=datetime.now(self.zone),
        )

    async def _persist_order(self, ctx: dict):
        logger.info("save_order", customer_id=ctx["customer_id"], total_amount=ctx["draft"].total_amount)
        ctx["order"] = await self.repository.insert(ctx["draft"])

    async def _resolve_payment_validity(self, ctx: dict):
        customer_id = ctx["customer_id"]
        logger.info("is_valid_payment_by_customer_id", customer_id=customer_id)
        result = await self._bounded("payment", self.payments.is_valid_payment(customer_id))
        if isinstance(result, NotFound):
            # The stored order stays with valid_payment=False; nothing is rolled back
            raise PaymentRecordNotFound(customer_id, ctx["order"].order_id)
        ctx["valid_payment"] = result.value

    async def _update_payment_status(self, ctx: dict):
        order_id = ctx["order"].order_id
        logger.info("update_payment_status", order_id=order_id, valid_payment=ctx["valid_payment"])
        updated = await self.repository.update_validity_by_id(order_id, ctx["valid_payment"])
        if updated is None:
            logger.critical("order_missing_after_insert", order_id=order_id)
            raise StorageInconsistency(order_id)
        ctx["order"] = updated

    async def _bounded(self, lookup: str, awaitable):
        try:
            return await asyncio.wait_for(awaitable, timeout=self.lookup_timeout)
        except asyncio.TimeoutError as e:
            ecomm_lookup_timeouts_total.labels(lookup=lookup).inc()
            raise LookupTimeout(lookup, self.lookup_timeout) from e
        except LookupTimeout as e:
            # Deadline hit inside the adapter (e.g. an httpx timeout)
            ecomm_lookup_timeouts_total.labels(lookup=e.lookup).inc()
            raise
