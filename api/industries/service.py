"""
Industry business logic.
"""

from __future__ import annotations

import logging

import asyncpg

from companies import repository as company_repository
from core import db
from core.errors import BadRequestError, NotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


def _industry_not_found(code: str) -> NotFoundError:
    return NotFoundError(f"Industry with code {code} not found")


async def list_industries(pool: asyncpg.Pool) -> dict:
    rows = await repository.list_industries(pool)
    return {"industries": [{"code": r["code"], "industry": r["industry"]} for r in rows]}


async def create_industry(pool: asyncpg.Pool, payload: schemas.IndustryCreate) -> dict:
    row = await repository.create_industry(pool, code=payload.code, industry=payload.industry)
    logger.info("industry_created code=%s", row["code"])
    return {"industry": row}


async def associate_company(pool: asyncpg.Pool, industry_code: str, payload: schemas.AssociationCreate) -> dict:
    """
    Link a company to an industry.

    The checks and the insert share one transaction; any failure rolls the
    whole thing back.
    """
    company_code = payload.company_code
    async with db.transaction(pool) as conn:
        if await repository.get_industry(conn, industry_code) is None:
            raise _industry_not_found(industry_code)

        if not await company_repository.company_exists(conn, company_code):
            raise NotFoundError(f"Company with code {company_code} not found")

        if await repository.association_exists(conn, company_code=company_code, industry_code=industry_code):
            raise BadRequestError("Company is already associated with this industry")

        row = await repository.create_association(
            conn,
            company_code=company_code,
            industry_code=industry_code,
        )

    logger.info("industry_associated industry_code=%s company_code=%s", industry_code, company_code)
    return {"association": row}


async def companies_for_industry(pool: asyncpg.Pool, industry_code: str) -> dict:
    industry = await repository.get_industry(pool, industry_code)
    if industry is None:
        raise _industry_not_found(industry_code)

    rows = await repository.list_companies_for_industry(pool, industry_code)
    return {
        "industry": industry["industry"],
        "companies": [{"code": r["code"], "name": r["name"]} for r in rows],
    }
