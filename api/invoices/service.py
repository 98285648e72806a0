"""
Invoice business logic.

Paid state:
- Unpaid (paid=false, paid_date=null) is the state every invoice starts in.
- Unpaid -> Paid stamps paid_date with today's date.
- Paid -> Paid keeps the original paid_date.
- Anything -> Unpaid clears paid_date.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import asyncpg

from core import db
from core.errors import NotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


def _today() -> date:
    return date.today()


def next_paid_date(
    *,
    was_paid: bool,
    paid_date: date | None,
    paid: bool,
    today: date,
) -> date | None:
    if not paid:
        return None
    if was_paid and paid_date is not None:
        return paid_date
    return today


# invoices.id is a SERIAL (int4) column.
MIN_INVOICE_ID = -2_147_483_648
MAX_INVOICE_ID = 2_147_483_647


def _not_found(invoice_id: int) -> NotFoundError:
    return NotFoundError(f"Invoice with id {invoice_id} not found")


def _require_storable_id(invoice_id: int) -> None:
    # No row can carry an id outside int4; the driver would reject it outright.
    if not MIN_INVOICE_ID <= invoice_id <= MAX_INVOICE_ID:
        raise _not_found(invoice_id)


def _invoice_payload(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": int(row["id"]),
        "comp_code": row["comp_code"],
        "amt": row["amt"],
        "paid": bool(row["paid"]),
        "add_date": row["add_date"],
        "paid_date": row["paid_date"],
    }


async def list_invoices(pool: asyncpg.Pool) -> dict:
    rows = await repository.list_invoices(pool)
    return {"invoices": [{"id": int(r["id"]), "comp_code": r["comp_code"]} for r in rows]}


async def get_invoice(pool: asyncpg.Pool, invoice_id: int) -> dict:
    _require_storable_id(invoice_id)
    row = await repository.get_invoice_with_company(pool, invoice_id)
    if row is None:
        raise _not_found(invoice_id)

    return {
        "invoice": {
            "id": int(row["id"]),
            "amt": row["amt"],
            "paid": bool(row["paid"]),
            "add_date": row["add_date"],
            "paid_date": row["paid_date"],
            "company": {
                "code": row["code"],
                "name": row["name"],
                "description": row["description"],
            },
        }
    }


async def create_invoice(pool: asyncpg.Pool, payload: schemas.InvoiceCreate) -> dict:
    # An unknown comp_code is rejected by the foreign key.
    row = await repository.create_invoice(pool, comp_code=payload.comp_code, amt=payload.amt)
    logger.info("invoice_created id=%s comp_code=%s", row["id"], row["comp_code"])
    return {"invoice": _invoice_payload(row)}


async def update_invoice(pool: asyncpg.Pool, invoice_id: int, payload: schemas.InvoiceUpdate) -> dict:
    _require_storable_id(invoice_id)
    async with db.transaction(pool) as conn:
        current = await repository.lock_invoice(conn, invoice_id)
        if current is None:
            raise _not_found(invoice_id)

        was_paid = bool(current["paid"])
        if payload.paid is None:
            paid = was_paid
            paid_date = current["paid_date"]
        else:
            paid = payload.paid
            paid_date = next_paid_date(
                was_paid=was_paid,
                paid_date=current["paid_date"],
                paid=paid,
                today=_today(),
            )

        row = await repository.update_invoice(
            conn,
            invoice_id,
            amt=payload.amt,
            paid=paid,
            paid_date=paid_date,
        )

    if row is None:
        raise _not_found(invoice_id)
    logger.info("invoice_updated id=%s paid=%s paid_date=%s", invoice_id, paid, paid_date)
    return {"invoice": _invoice_payload(row)}


async def delete_invoice(pool: asyncpg.Pool, invoice_id: int) -> dict:
    _require_storable_id(invoice_id)
    deleted = await repository.delete_invoice(pool, invoice_id)
    if deleted == 0:
        raise _not_found(invoice_id)
    logger.info("invoice_deleted id=%s", invoice_id)
    return {"status": "deleted"}
