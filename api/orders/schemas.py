"""
Pydantic schemas for order endpoints.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class CreateOrderRequest(BaseModel):
    order_no: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1)
    product_name: str = Field(..., min_length=1)
    quantity: int
    total_price: Decimal


class UpdateStatusRequest(BaseModel):
    # Required, but any string is accepted; no transition rules.
    status: str


class OrderResponse(BaseModel):
    order_id: int
    order_no: str
    user_name: str
    product_name: str
    quantity: int
    total_price: float
    order_status: str
    create_time: datetime | None


class MessageResponse(BaseModel):
    message: str
