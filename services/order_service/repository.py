import asyncio
import uuid
from dataclasses import replace
from typing import Protocol
from zoneinfo import ZoneInfo

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shared.config import settings
from .domain import OrderDraft, PersistedOrder
from .mappers import persisted_from_draft, persisted_from_record, record_from_persisted
from .models import OrderRecord

logger = structlog.get_logger(__name__)


class OrderRepository(Protocol):
    async def insert(self, draft: OrderDraft) -> PersistedOrder: ...

    async def update_validity_by_id(self, order_id: str, valid_payment: bool) -> PersistedOrder | None: ...

    async def get_by_id(self, order_id: str) -> PersistedOrder | None: ...

    async def count(self) -> int: ...


class InMemoryOrderRepository:
    """Append-only list of orders; one lock serializes every access."""

    def __init__(self, zone: ZoneInfo | None = None):
        self.zone = zone or ZoneInfo(settings.ORDER_TIMEZONE)
        self._orders: list[PersistedOrder] = []
        self._lock = asyncio.Lock()

    async def insert(self, draft: OrderDraft) -> PersistedOrder:
        order = persisted_from_draft(str(uuid.uuid4()), draft, self.zone)
        async with self._lock:
            self._orders.append(order)
        logger.info("order_saved", order_id=order.order_id, total_amount=order.total_amount)
        return order

    async def update_validity_by_id(self, order_id: str, valid_payment: bool) -> PersistedOrder | None:
        async with self._lock:
            for index, order in enumerate(self._orders):
                if order.order_id == order_id:
                    updated = replace(order, valid_payment=valid_payment)
                    self._orders[index] = updated
                    return updated
        return None

    async def get_by_id(self, order_id: str) -> PersistedOrder | None:
        async with self._lock:
            return next((o for o in self._orders if o.order_id == order_id), None)

    async def count(self) -> int:
        async with self._lock:
            return len(self._orders)


class SqlOrderRepository:
    """Orders in SQL tables; each call runs in its own session and transaction."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], zone: ZoneInfo | None = None):
        self.session_factory = session_factory
        self.zone = zone or ZoneInfo(settings.ORDER_TIMEZONE)

    async def insert(self, draft: OrderDraft) -> PersistedOrder:
        order = persisted_from_draft(str(uuid.uuid4()), draft, self.zone)
        async with self.session_factory() as db:
            db.add(record_from_persisted(order))
            await db.commit()
        logger.info("order_saved", order_id=order.order_id, total_amount=order.total_amount)
        return order

    async def update_validity_by_id(self, order_id: str, valid_payment: bool) -> PersistedOrder | None:
        async with self.session_factory() as db:
            record = await self._get_record(db, order_id)
            if not record:
                return None

            record.valid_payment = valid_payment
            await db.commit()
            return persisted_from_record(record, self.zone)

    async def get_by_id(self, order_id: str) -> PersistedOrder | None:
        async with self.session_factory() as db:
            record = await self._get_record(db, order_id)
            return persisted_from_record(record, self.zone) if record else None

    async def count(self) -> int:
        async with self.session_factory() as db:
            result = await db.execute(select(func.count()).select_from(OrderRecord))
            return result.scalar_one()

    @staticmethod
    async def _get_record(db: AsyncSession, order_id: str) -> OrderRecord | None:
        result = await db.execute(select(OrderRecord).where(OrderRecord.id == order_id))
        return result.scalars().first()
