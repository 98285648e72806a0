"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created in the FastAPI lifespan (see `api/main.py`), stored on
`app.state.pool` and handed to routes through the `get_pool` dependency.
Repositories receive the pool or a connection as their first argument and
never reach for module state.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Union

import asyncpg
from fastapi import Request

from . import config

# Both expose fetch/fetchrow/execute with the same signatures.
Executor = Union[asyncpg.Pool, asyncpg.Connection]


async def create_pool() -> asyncpg.Pool:
    return await asyncpg.create_pool(
        dsn=config.database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
        command_timeout=config.command_timeout(),
    )


def get_pool(request: Request) -> asyncpg.Pool:
    """
    FastAPI dependency returning the pool owned by the running app.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created on startup.")
    return pool


@asynccontextmanager
async def transaction(pool: asyncpg.Pool) -> AsyncIterator[asyncpg.Connection]:
    """
    Acquire one connection and run the block inside a transaction.

    Any exception raised in the block rolls the transaction back.
    """
    async with pool.acquire() as conn:
        async with conn.transaction():
            yield conn


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(executor: Executor, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await executor.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(executor: Executor, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await executor.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(executor: Executor, sql: str, *args: Any) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return the affected row count.
    """
    status = await executor.execute(sql, *args)
    return rows_affected(status)


def rows_affected(status: str) -> int:
    """
    Parse the row count out of a command tag such as "DELETE 3" or "INSERT 0 1".

    DDL tags ("CREATE TABLE") carry no count and yield 0.
    """
    last = (status or "").rsplit(" ", 1)[-1]
    return int(last) if last.isdigit() else 0
