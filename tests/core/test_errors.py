"""store_failure collapses store errors and leaves everything else alone."""

import asyncpg
import pytest

from core.errors import NotFoundError, StoreFailureError, store_failure


def test_connection_error_becomes_store_failure():
    with pytest.raises(StoreFailureError) as info:
        with store_failure("查询失败"):
            raise ConnectionRefusedError("db down")

    assert info.value.message == "查询失败"
    assert info.value.status_code == 500
    assert isinstance(info.value.__cause__, ConnectionRefusedError)


def test_asyncpg_interface_error_becomes_store_failure():
    with pytest.raises(StoreFailureError):
        with store_failure("删除失败"):
            raise asyncpg.InterfaceError("pool is closing")


def test_programming_errors_are_not_swallowed():
    with pytest.raises(KeyError):
        with store_failure("查询失败"):
            raise KeyError("order_id")


def test_not_found_is_404():
    assert NotFoundError("订单不存在").status_code == 404
