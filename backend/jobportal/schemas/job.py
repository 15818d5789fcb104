from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NewJob(BaseModel):
    name: str = Field(max_length=255)
    salary: str = Field(default="", max_length=100)
    notice_period: str = Field(default="", max_length=100)


class JobOut(BaseModel):
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    cid: int | None = None
    name: str
    salary: str | None = None
    notice_period: str | None = None

    model_config = ConfigDict(from_attributes=True)
