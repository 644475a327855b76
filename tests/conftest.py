"""Shared test fixtures: a recording fake Database and an ASGI test client.

The fake stands in for the asyncpg-backed Database through FastAPI's
dependency override, so route tests never need a running PostgreSQL.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from core.db import get_database
from main import app


class FakeDatabase:
    """Records every statement and returns canned results.

    - row: returned by fetch_one
    - rows: returned by fetch_all
    - rowcount: returned by execute
    - error: raised by every call when set
    """

    def __init__(self):
        self.calls = []
        self.row = None
        self.rows = []
        self.rowcount = 1
        self.error = None

    def _record(self, kind, sql, args):
        self.calls.append((kind, " ".join(sql.split()), list(args)))
        if self.error is not None:
            raise self.error

    async def fetch_one(self, sql, *args):
        self._record("fetch_one", sql, args)
        return self.row

    async def fetch_all(self, sql, *args):
        self._record("fetch_all", sql, args)
        return self.rows

    async def execute(self, sql, *args):
        self._record("execute", sql, args)
        return self.rowcount


def order_row(order_id=1, **overrides):
    row = {
        "order_id": order_id,
        "order_no": f"ORD{order_id}",
        "user_name": "Alice",
        "product_name": "Widget",
        "quantity": 2,
        "total_price": Decimal("19.98"),
        "order_status": "待付款",
        "create_time": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    }
    row.update(overrides)
    return row


@pytest.fixture
def make_order_row():
    return order_row


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
async def client(fake_db):
    """Test client with the Database dependency pointed at fake_db."""
    app.dependency_overrides[get_database] = lambda: fake_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
