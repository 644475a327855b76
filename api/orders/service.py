"""
Order business logic.

Maps repository results to API results: zero rows become 404, any store error
becomes a 500 carrying the operation's message.
"""

from __future__ import annotations

import logging

from core.db import Database
from core.errors import NotFoundError, store_failure

from . import repository, schemas

logger = logging.getLogger(__name__)

PENDING_PAYMENT = "待付款"

QUERY_FAILED = "查询失败"
CREATE_FAILED = "创建失败"
UPDATE_FAILED = "更新失败"
DELETE_FAILED = "删除失败"
ORDER_NOT_FOUND = "订单不存在"

ORDER_CREATED = "订单创建成功"
STATUS_UPDATED = "订单状态更新成功"
ORDER_DELETED = "订单已删除"


def _not_found(order_id: int) -> NotFoundError:
    logger.info("Order %s not found", order_id)
    return NotFoundError(ORDER_NOT_FOUND)


def _present(value: str | None) -> str | None:
    # Blank filters are ignored; anything else is matched as sent.
    return value if value and value.strip() else None


def _to_order_response(row: dict) -> schemas.OrderResponse:
    return schemas.OrderResponse(
        order_id=int(row["order_id"]),
        order_no=str(row["order_no"]),
        user_name=str(row["user_name"]),
        product_name=str(row["product_name"]),
        quantity=int(row["quantity"]),
        total_price=float(row["total_price"]),
        order_status=str(row["order_status"]),
        create_time=row["create_time"],
    )


async def list_orders(
    database: Database,
    *,
    page: int = 1,
    page_size: int = 10,
    status: str | None = None,
    keyword: str | None = None,
) -> list[schemas.OrderResponse]:
    with store_failure(QUERY_FAILED):
        rows = await repository.list_orders(
            database,
            page=page,
            page_size=page_size,
            status=_present(status),
            keyword=_present(keyword),
        )
    return [_to_order_response(row) for row in rows]


async def get_order(database: Database, order_id: int) -> schemas.OrderResponse:
    with store_failure(QUERY_FAILED):
        row = await repository.get_order(database, order_id)
    if row is None:
        raise _not_found(order_id)
    return _to_order_response(row)


async def create_order(
    database: Database, payload: schemas.CreateOrderRequest
) -> schemas.MessageResponse:
    with store_failure(CREATE_FAILED):
        await repository.create_order(
            database,
            order_no=payload.order_no,
            user_name=payload.user_name,
            product_name=payload.product_name,
            quantity=payload.quantity,
            total_price=payload.total_price,
            order_status=PENDING_PAYMENT,
        )
    logger.info("Order %s created", payload.order_no)
    return schemas.MessageResponse(message=ORDER_CREATED)


async def update_order_status(
    database: Database, order_id: int, payload: schemas.UpdateStatusRequest
) -> schemas.MessageResponse:
    with store_failure(UPDATE_FAILED):
        updated = await repository.update_order_status(database, order_id, payload.status)
    if not updated:
        raise _not_found(order_id)
    return schemas.MessageResponse(message=STATUS_UPDATED)


async def delete_order(database: Database, order_id: int) -> schemas.MessageResponse:
    with store_failure(DELETE_FAILED):
        deleted = await repository.delete_order(database, order_id)
    if not deleted:
        raise _not_found(order_id)
    return schemas.MessageResponse(message=ORDER_DELETED)
