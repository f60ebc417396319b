from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, Union

import httpx
from pydantic import ValidationError
import structlog

from services.directory_service.repository import DirectoryRepository
from services.directory_service.schemas import (
    CartItemResponse,
    CustomerCardResponse,
    CustomerResponse,
    PaymentStatusResponse,
)
from .domain import CartItem, Customer, PaymentCard
from .errors import LookupFailed, LookupTimeout
from .mappers import card_from_response, cart_item_from_response, customer_from_response

T = TypeVar("T")

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


class NotFound:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NOT_FOUND"


NOT_FOUND = NotFound()

LookupResult = Union[Found[T], NotFound]


# ---- Ports ----

class CustomerLookup(Protocol):
    async def get_customer(self, customer_id: int) -> LookupResult[Customer]: ...


class CardLookup(Protocol):
    async def get_card(self, customer_id: int) -> LookupResult[PaymentCard]: ...


class CartLookup(Protocol):
    async def get_cart_items(self, customer_id: int) -> list[CartItem]: ...


class PaymentValidityLookup(Protocol):
    async def is_valid_payment(self, customer_id: int) -> LookupResult[bool]: ...


# ---- In-process directory ----

class InMemoryDirectory:
    """Answers every lookup from a `DirectoryRepository` in this process."""

    def __init__(self, repository: DirectoryRepository | None = None):
        self.repository = repository or DirectoryRepository()

    async def get_customer(self, customer_id: int) -> LookupResult[Customer]:
        response = self.repository.get_customer(customer_id)
        if response is None:
            return NOT_FOUND
        return Found(customer_from_response(response))

    async def get_card(self, customer_id: int) -> LookupResult[PaymentCard]:
        response = self.repository.get_card(customer_id)
        if response is None:
            return NOT_FOUND
        return Found(card_from_response(response))

    async def get_cart_items(self, customer_id: int) -> list[CartItem]:
        return [cart_item_from_response(item) for item in self.repository.get_cart_items(customer_id)]

    async def is_valid_payment(self, customer_id: int) -> LookupResult[bool]:
        response = self.repository.get_payment_status(customer_id)
        if response is None:
            return NOT_FOUND
        return Found(response.valid_payment)


# ---- Directory Service over HTTP ----

class HttpDirectory:
    """
    Answers every lookup from the Directory Service REST API.

    A 404 is a miss. httpx timeouts become `LookupTimeout`; any other
    transport error, unexpected status or malformed body becomes `LookupFailed`.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def aclose(self):
        await self.client.aclose()

    async def _fetch(self, lookup: str, path: str, parse):
        """GETs `path` and returns `parse(body)`, or None on a 404."""
        try:
            resp = await self.client.get(path)
            if resp.status_code == 404:
                return None
            resp.raise_for_status()
            return parse(resp.json())
        except httpx.TimeoutException as e:
            logger.error("lookup_timeout", lookup=lookup, path=path, error=str(e))
            raise LookupTimeout(lookup) from e
        except httpx.HTTPStatusError as e:
            logger.error("lookup_failed", lookup=lookup, path=path, status_code=e.response.status_code)
            raise LookupFailed(lookup, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("lookup_failed", lookup=lookup, path=path, error=str(e))
            raise LookupFailed(lookup, str(e)) from e
        except (ValueError, TypeError, ValidationError) as e:
            # Non-JSON body (e.g. a proxy error page) or a body of the wrong shape
            logger.error("lookup_failed", lookup=lookup, path=path, error=str(e))
            raise LookupFailed(lookup, "malformed response") from e

    async def get_customer(self, customer_id: int) -> LookupResult[Customer]:
        customer = await self._fetch(
            "customer",
            f"/customers/{customer_id}",
            lambda body: customer_from_response(CustomerResponse.model_validate(body)),
        )
        return NOT_FOUND if customer is None else Found(customer)

    async def get_card(self, customer_id: int) -> LookupResult[PaymentCard]:
        card = await self._fetch(
            "card",
            f"/cards/{customer_id}",
            lambda body: card_from_response(CustomerCardResponse.model_validate(body)),
        )
        return NOT_FOUND if card is None else Found(card)

    async def get_cart_items(self, customer_id: int) -> list[CartItem]:
        items = await self._fetch(
            "cart",
            f"/carts/{customer_id}/items",
            lambda body: [cart_item_from_response(CartItemResponse.model_validate(item)) for item in body],
        )
        return items or []

    async def is_valid_payment(self, customer_id: int) -> LookupResult[bool]:
        valid = await self._fetch(
            "payment",
            f"/payments/{customer_id}",
            lambda body: PaymentStatusResponse.model_validate(body).valid_payment,
        )
        return NOT_FOUND if valid is None else Found(valid)
