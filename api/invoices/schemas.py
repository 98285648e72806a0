"""
Pydantic schemas for invoice endpoints.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class InvoiceCreate(BaseModel):
    comp_code: str = Field(..., min_length=1, max_length=200)
    amt: Decimal = Field(..., ge=0)


class InvoiceUpdate(BaseModel):
    amt: Decimal = Field(..., ge=0)
    # Omitted means "leave the paid state alone".
    paid: bool | None = None
