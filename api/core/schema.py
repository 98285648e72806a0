"""
Table definitions for the four tables the API works against.

Statements are ordered so foreign keys always point at an existing table.
"""

from __future__ import annotations

from . import db

CREATE_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS companies (
        code TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        description TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS invoices (
        id SERIAL PRIMARY KEY,
        comp_code TEXT NOT NULL REFERENCES companies ON DELETE CASCADE,
        amt NUMERIC NOT NULL,
        paid BOOLEAN NOT NULL DEFAULT false,
        add_date DATE NOT NULL DEFAULT CURRENT_DATE,
        paid_date DATE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS industries (
        code TEXT PRIMARY KEY,
        industry TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS companies_industries (
        company_code TEXT NOT NULL REFERENCES companies ON DELETE CASCADE,
        industry_code TEXT NOT NULL REFERENCES industries ON DELETE CASCADE,
        PRIMARY KEY (company_code, industry_code)
    )
    """,
)

TABLES: tuple[str, ...] = ("companies_industries", "invoices", "industries", "companies")


async def create_schema(executor: db.Executor) -> None:
    for statement in CREATE_STATEMENTS:
        await db.execute(executor, statement)


async def truncate_all(executor: db.Executor) -> None:
    await db.execute(executor, f"TRUNCATE {', '.join(TABLES)} RESTART IDENTITY CASCADE")
