"""
Company API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, status

from core import db

from . import schemas, service

router = APIRouter(prefix="/companies")


@router.get("")
async def list_companies(pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.list_companies(pool)


@router.get("/{code}")
async def get_company(code: str, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    """
    Company detail plus its invoice ids and industry names.
    """
    return await service.get_company(pool, code)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_company(
    payload: schemas.CompanyCreate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await service.create_company(pool, payload)


@router.put("/{code}")
async def update_company(
    code: str,
    payload: schemas.CompanyUpdate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await service.update_company(pool, code, payload)


@router.delete("/{code}")
async def delete_company(code: str, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.delete_company(pool, code)
