"""
Order API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query

from core.db import Database, get_database

from . import schemas, service

router = APIRouter(prefix="/api/orders")

# order_id is BIGSERIAL.
MAX_ORDER_ID = 2**63 - 1


@router.get("", response_model=list[schemas.OrderResponse])
async def list_orders(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, alias="pageSize", ge=1),
    status: str | None = Query(default=None),
    keyword: str | None = Query(default=None, max_length=500),
    database: Database = Depends(get_database),
) -> list[schemas.OrderResponse]:
    return await service.list_orders(
        database,
        page=page,
        page_size=page_size,
        status=status,
        keyword=keyword,
    )


@router.get("/{order_id}", response_model=schemas.OrderResponse)
async def get_order(
    order_id: int = Path(..., le=MAX_ORDER_ID),
    database: Database = Depends(get_database),
) -> schemas.OrderResponse:
    return await service.get_order(database, order_id)


@router.post("", response_model=schemas.MessageResponse)
async def create_order(
    request: schemas.CreateOrderRequest,
    database: Database = Depends(get_database),
) -> schemas.MessageResponse:
    return await service.create_order(database, request)


@router.put("/{order_id}/status", response_model=schemas.MessageResponse)
async def update_order_status(
    request: schemas.UpdateStatusRequest,
    order_id: int = Path(..., le=MAX_ORDER_ID),
    database: Database = Depends(get_database),
) -> schemas.MessageResponse:
    return await service.update_order_status(database, order_id, request)


@router.delete("/{order_id}", response_model=schemas.MessageResponse)
async def delete_order(
    order_id: int = Path(..., le=MAX_ORDER_ID),
    database: Database = Depends(get_database),
) -> schemas.MessageResponse:
    return await service.delete_order(database, order_id)
