"""
Invoice persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from core import db

_INVOICE_COLUMNS = "id, comp_code, amt, paid, add_date, paid_date"


async def list_invoices(executor: db.Executor) -> list[dict[str, Any]]:
    return await db.fetch_all(
        executor,
        """
        SELECT id, comp_code
        FROM invoices
        ORDER BY id
        """,
    )


async def get_invoice_with_company(executor: db.Executor, invoice_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        executor,
        """
        SELECT
          inv.id,
          inv.amt,
          inv.paid,
          inv.add_date,
          inv.paid_date,
          c.code,
          c.name,
          c.description
        FROM invoices inv
        JOIN companies c ON c.code = inv.comp_code
        WHERE inv.id = $1
        """,
        invoice_id,
    )


async def lock_invoice(executor: db.Executor, invoice_id: int) -> dict[str, Any] | None:
    """
    Read the paid state of an invoice and hold its row lock until the
    surrounding transaction ends.
    """
    return await db.fetch_one(
        executor,
        """
        SELECT id, paid, paid_date
        FROM invoices
        WHERE id = $1
        FOR UPDATE
        """,
        invoice_id,
    )


async def create_invoice(executor: db.Executor, *, comp_code: str, amt: Decimal) -> dict[str, Any]:
    row = await db.fetch_one(
        executor,
        f"""
        INSERT INTO invoices (comp_code, amt)
        VALUES ($1, $2)
        RETURNING {_INVOICE_COLUMNS}
        """,
        comp_code,
        amt,
    )
    if row is None:
        raise RuntimeError("Failed to create invoice.")
    return row


async def update_invoice(
    executor: db.Executor,
    invoice_id: int,
    *,
    amt: Decimal,
    paid: bool,
    paid_date: date | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        executor,
        f"""
        UPDATE invoices
        SET amt = $2,
            paid = $3,
            paid_date = $4
        WHERE id = $1
        RETURNING {_INVOICE_COLUMNS}
        """,
        invoice_id,
        amt,
        paid,
        paid_date,
    )


async def delete_invoice(executor: db.Executor, invoice_id: int) -> int:
    return await db.execute(
        executor,
        """
        DELETE FROM invoices
        WHERE id = $1
        """,
        invoice_id,
    )
