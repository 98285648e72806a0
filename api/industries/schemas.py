"""
Pydantic schemas for industry endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class IndustryCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=100)
    industry: str = Field(..., min_length=1, max_length=200)


class AssociationCreate(BaseModel):
    company_code: str = Field(..., min_length=1, max_length=200)
