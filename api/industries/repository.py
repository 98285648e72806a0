"""
Industry persistence (raw SQL), including the companies_industries join table.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_industries(executor: db.Executor) -> list[dict[str, Any]]:
    return await db.fetch_all(
        executor,
        """
        SELECT code, industry
        FROM industries
        ORDER BY code
        """,
    )


async def get_industry(executor: db.Executor, code: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        executor,
        """
        SELECT code, industry
        FROM industries
        WHERE code = $1
        """,
        code,
    )


async def create_industry(executor: db.Executor, *, code: str, industry: str) -> dict[str, Any]:
    row = await db.fetch_one(
        executor,
        """
        INSERT INTO industries (code, industry)
        VALUES ($1, $2)
        RETURNING code, industry
        """,
        code,
        industry,
    )
    if row is None:
        raise RuntimeError("Failed to create industry.")
    return row


async def association_exists(executor: db.Executor, *, company_code: str, industry_code: str) -> bool:
    row = await db.fetch_one(
        executor,
        """
        SELECT 1 AS ok
        FROM companies_industries
        WHERE company_code = $1
          AND industry_code = $2
        LIMIT 1
        """,
        company_code,
        industry_code,
    )
    return row is not None


async def create_association(executor: db.Executor, *, company_code: str, industry_code: str) -> dict[str, Any]:
    row = await db.fetch_one(
        executor,
        """
        INSERT INTO companies_industries (company_code, industry_code)
        VALUES ($1, $2)
        RETURNING company_code, industry_code
        """,
        company_code,
        industry_code,
    )
    if row is None:
        raise RuntimeError("Failed to associate company with industry.")
    return row


async def list_companies_for_industry(executor: db.Executor, industry_code: str) -> list[dict[str, Any]]:
    return await db.fetch_all(
        executor,
        """
        SELECT c.code, c.name
        FROM companies c
        JOIN companies_industries ci ON ci.company_code = c.code
        WHERE ci.industry_code = $1
        ORDER BY c.code
        """,
        industry_code,
    )
