"""
Order persistence (raw SQL).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from core.db import Database
from core.query import SelectQuery, escape_like

ORDER_COLUMNS = (
    "order_id, order_no, user_name, product_name, quantity, "
    "total_price, order_status, create_time"
)


def build_list_query(
    *,
    page: int = 1,
    page_size: int = 10,
    status: str | None = None,
    keyword: str | None = None,
) -> tuple[str, list[Any]]:
    """
    Newest-first page of orders, optionally filtered by exact status and by
    a substring of order_no or user_name.
    """
    q = SelectQuery(f"SELECT {ORDER_COLUMNS} FROM orders")
    if status:
        q.where("order_status = {}", status)
    if keyword:
        pattern = f"%{escape_like(keyword)}%"
        q.where(
            "(order_no LIKE {} ESCAPE '\\' OR user_name LIKE {} ESCAPE '\\')",
            pattern,
            pattern,
        )
    q.order_by("create_time DESC, order_id DESC")
    q.limit(page_size)
    q.offset((page - 1) * page_size)
    return q.build()


async def list_orders(
    database: Database,
    *,
    page: int = 1,
    page_size: int = 10,
    status: str | None = None,
    keyword: str | None = None,
) -> list[dict]:
    sql, args = build_list_query(page=page, page_size=page_size, status=status, keyword=keyword)
    return await database.fetch_all(sql, *args)


async def get_order(database: Database, order_id: int) -> dict | None:
    return await database.fetch_one(
        f"""
        SELECT {ORDER_COLUMNS}
        FROM orders
        WHERE order_id = $1
        """,
        order_id,
    )


async def create_order(
    database: Database,
    *,
    order_no: str,
    user_name: str,
    product_name: str,
    quantity: int,
    total_price: Decimal,
    order_status: str,
) -> int:
    return await database.execute(
        """
        INSERT INTO orders
            (order_no, user_name, product_name, quantity, total_price, order_status, create_time)
        VALUES ($1, $2, $3, $4, $5, $6, now())
        """,
        order_no,
        user_name,
        product_name,
        quantity,
        total_price,
        order_status,
    )


async def update_order_status(database: Database, order_id: int, order_status: str) -> int:
    return await database.execute(
        """
        UPDATE orders
        SET order_status = $1
        WHERE order_id = $2
        """,
        order_status,
        order_id,
    )


async def delete_order(database: Database, order_id: int) -> int:
    return await database.execute(
        """
        DELETE FROM orders
        WHERE order_id = $1
        """,
        order_id,
    )
