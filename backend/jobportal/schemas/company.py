from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NewCompany(BaseModel):
    name: str = Field(max_length=255)
    location: str = Field(max_length=255)
    field: str = Field(max_length=255)


class CompanyOut(BaseModel):
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    name: str
    location: str
    field: str

    model_config = ConfigDict(from_attributes=True)
