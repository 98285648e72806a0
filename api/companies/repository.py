"""
Company persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_companies(executor: db.Executor) -> list[dict[str, Any]]:
    return await db.fetch_all(
        executor,
        """
        SELECT code, name
        FROM companies
        ORDER BY code
        """,
    )


async def get_company(executor: db.Executor, code: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        executor,
        """
        SELECT code, name, description
        FROM companies
        WHERE code = $1
        """,
        code,
    )


async def company_exists(executor: db.Executor, code: str) -> bool:
    row = await db.fetch_one(
        executor,
        """
        SELECT 1 AS ok
        FROM companies
        WHERE code = $1
        LIMIT 1
        """,
        code,
    )
    return row is not None


async def list_invoice_ids(executor: db.Executor, code: str) -> list[int]:
    rows = await db.fetch_all(
        executor,
        """
        SELECT id
        FROM invoices
        WHERE comp_code = $1
        ORDER BY id
        """,
        code,
    )
    return [int(row["id"]) for row in rows]


async def list_industry_names(executor: db.Executor, code: str) -> list[str]:
    rows = await db.fetch_all(
        executor,
        """
        SELECT i.industry
        FROM industries i
        JOIN companies_industries ci ON ci.industry_code = i.code
        WHERE ci.company_code = $1
        ORDER BY i.industry
        """,
        code,
    )
    return [str(row["industry"]) for row in rows]


async def create_company(
    executor: db.Executor,
    *,
    code: str,
    name: str,
    description: str | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        executor,
        """
        INSERT INTO companies (code, name, description)
        VALUES ($1, $2, $3)
        RETURNING code, name, description
        """,
        code,
        name,
        description,
    )
    if row is None:
        raise RuntimeError("Failed to create company.")
    return row


async def update_company(
    executor: db.Executor,
    code: str,
    *,
    name: str,
    description: str | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        executor,
        """
        UPDATE companies
        SET name = $2,
            description = $3
        WHERE code = $1
        RETURNING code, name, description
        """,
        code,
        name,
        description,
    )


async def delete_company(executor: db.Executor, code: str) -> int:
    """
    Delete a company; invoices and industry links go with it (ON DELETE CASCADE).
    Returns the number of company rows removed.
    """
    return await db.execute(
        executor,
        """
        DELETE FROM companies
        WHERE code = $1
        """,
        code,
    )
