"""
Industry API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, status

from core import db

from . import schemas, service

router = APIRouter(prefix="/industries")


@router.get("")
async def list_industries(pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.list_industries(pool)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_industry(
    payload: schemas.IndustryCreate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await service.create_industry(pool, payload)


@router.post("/{code}/companies", status_code=status.HTTP_201_CREATED)
async def associate_company(
    code: str,
    payload: schemas.AssociationCreate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await service.associate_company(pool, code, payload)


@router.get("/{code}/companies")
async def companies_for_industry(code: str, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.companies_for_industry(pool, code)
