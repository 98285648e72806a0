"""
Invoice API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, status

from core import db

from . import schemas, service

router = APIRouter(prefix="/invoices")


@router.get("")
async def list_invoices(pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.list_invoices(pool)


@router.get("/{invoice_id}")
async def get_invoice(invoice_id: int, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    """
    Invoice detail with its owning company nested under `company`.
    """
    return await service.get_invoice(pool, invoice_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_invoice(
    payload: schemas.InvoiceCreate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    return await service.create_invoice(pool, payload)


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: int,
    payload: schemas.InvoiceUpdate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Update the amount and, when `paid` is given, move the paid state.
    """
    return await service.update_invoice(pool, invoice_id, payload)


@router.delete("/{invoice_id}")
async def delete_invoice(invoice_id: int, pool: asyncpg.Pool = Depends(db.get_pool)) -> dict:
    return await service.delete_invoice(pool, invoice_id)
