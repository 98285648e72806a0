"""
Pydantic schemas for company endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CompanyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)


class CompanyUpdate(CompanyCreate):
    """
    Same fields as creation; the code in the path is never rewritten.
    """
