"""
Tests for services/order_service/router.py -- the order HTTP API.
"""

import asyncio

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from conftest import make_service
from services.order_service.domain import PaymentCard
from services.order_service.lookups import Found
from services.order_service.router import public_router, router


class SlowCards:
    async def get_card(self, customer_id):
        await asyncio.sleep(10)
        return Found(PaymentCard(long_num="0000"))


def build_app(service) -> FastAPI:
    app = FastAPI()
    app.include_router(public_router)
    app.include_router(router)
    app.state.order_service = service
    return app


@pytest_asyncio.fixture
async def client(service):
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=build_app(service)), base_url="http://orders"
    ) as c:
        yield c


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"service": "order", "status": "running"}


class TestSubmitOrder:
    @pytest.mark.asyncio
    async def test_submit_registers_order(self, client):
        resp = await client.post("/", json={"customer_id": 1})
        assert resp.status_code == 201
        body = resp.json()
        assert body["customer"] == {"customer_id": 1, "full_name": "Gael Alves"}
        assert body["card"] == {"long_num": "5172563238920845"}
        assert [i["product_id"] for i in body["items"]] == [103, 101, 102]
        assert body["total_amount"] == pytest.approx(96.5)
        assert body["valid_payment"] is True

    @pytest.mark.asyncio
    async def test_submitted_order_can_be_fetched(self, client):
        created = (await client.post("/", json={"customer_id": 2})).json()
        resp = await client.get(f"/{created['order_id']}")
        assert resp.status_code == 200
        assert resp.json()["valid_payment"] is False
        assert resp.json()["order_id"] == created["order_id"]

    @pytest.mark.asyncio
    async def test_unknown_order(self, client):
        assert (await client.get("/no-such-order")).status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "customer_id, status_code",
        [
            (5, 404),  # no such customer
            (4, 404),  # no card on file
            (3, 422),  # empty cart
        ],
    )
    async def test_missing_data(self, client, repository, customer_id, status_code):
        resp = await client.post("/", json={"customer_id": customer_id})
        assert resp.status_code == status_code
        assert await repository.count() == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("customer_id", [0, -3])
    async def test_non_positive_customer_id_is_not_found(self, client, repository, customer_id):
        resp = await client.post("/", json={"customer_id": customer_id})
        assert resp.status_code == 404
        assert await repository.count() == 0

    @pytest.mark.asyncio
    async def test_non_integer_customer_id_is_rejected(self, client):
        resp = await client.post("/", json={"customer_id": "abc"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_payment_record_reports_stored_order(self, unpaid_directory, repository):
        app = build_app(make_service(unpaid_directory, repository))
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://orders") as c:
            resp = await c.post("/", json={"customer_id": 7})
            assert resp.status_code == 409
            order_id = resp.json()["detail"]["order_id"]

            stored = await c.get(f"/{order_id}")
            assert stored.status_code == 200
            assert stored.json()["valid_payment"] is False

    @pytest.mark.asyncio
    async def test_lookup_timeout_is_gateway_timeout(self, directory, repository):
        service = make_service(directory, repository, lookup_timeout=0.05, cards=SlowCards())
        app = build_app(service)
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://orders") as c:
            resp = await c.post("/", json={"customer_id": 1})
        assert resp.status_code == 504
        assert await repository.count() == 0
