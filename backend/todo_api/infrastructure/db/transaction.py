"""
Unit-of-work boundary.
Every use case runs inside exactly one database transaction; Tortoise routes
model queries issued inside the block through the transaction connection.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from tortoise.transactions import in_transaction


@asynccontextmanager
async def transactional(connection_name: str = "default") -> AsyncIterator[None]:
    """
    Commit when the block exits normally, roll back when it raises.

    Usage:
        async with transactional():
            todo = await use_case.execute(...)
    """
    async with in_transaction(connection_name):
        yield
