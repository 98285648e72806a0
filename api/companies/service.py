"""
Company business logic.

Company codes are derived from the name once, on creation, and never change.
"""

from __future__ import annotations

import logging

import asyncpg
from slugify import slugify

from core.errors import BadRequestError, NotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


def company_code(name: str) -> str:
    """
    Slug used as the company's primary key, e.g. "Amazon Inc" -> "amazon-inc".
    """
    return slugify((name or "").strip(), lowercase=True, separator="-")


def _not_found(code: str) -> NotFoundError:
    return NotFoundError(f"Company with code {code} not found")


async def list_companies(pool: asyncpg.Pool) -> dict:
    rows = await repository.list_companies(pool)
    return {"companies": [{"code": str(r["code"]), "name": str(r["name"])} for r in rows]}


async def get_company(pool: asyncpg.Pool, code: str) -> dict:
    row = await repository.get_company(pool, code)
    if row is None:
        logger.debug("company_not_found code=%s", code)
        raise _not_found(code)

    invoices = await repository.list_invoice_ids(pool, code)
    industries = await repository.list_industry_names(pool, code)
    return {
        "company": {
            "code": row["code"],
            "name": row["name"],
            "description": row["description"],
            "invoices": invoices,
            "industries": industries,
        }
    }


async def create_company(pool: asyncpg.Pool, payload: schemas.CompanyCreate) -> dict:
    code = company_code(payload.name)
    if not code:
        raise BadRequestError("Company name must contain at least one letter or digit.")

    # No pre-check: a duplicate slug is rejected by the primary key.
    row = await repository.create_company(
        pool,
        code=code,
        name=payload.name,
        description=payload.description,
    )
    logger.info("company_created code=%s", code)
    return {"company": row}


async def update_company(pool: asyncpg.Pool, code: str, payload: schemas.CompanyUpdate) -> dict:
    row = await repository.update_company(
        pool,
        code,
        name=payload.name,
        description=payload.description,
    )
    if row is None:
        raise _not_found(code)
    logger.info("company_updated code=%s", code)
    return {"company": row}


async def delete_company(pool: asyncpg.Pool, code: str) -> dict:
    deleted = await repository.delete_company(pool, code)
    if deleted == 0:
        raise _not_found(code)
    logger.info("company_deleted code=%s", code)
    return {"status": "deleted"}
