from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator


class StudentCreate(BaseModel):
    """Body of POST /students; name is checked by the CRUD layer"""
    name: Optional[str] = None
    roll: Optional[str] = None
    email: Optional[str] = None
    batch: Optional[str] = None

    @field_validator("name", "roll", "email", "batch", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class StudentResponse(BaseModel):
    id: int
    name: str
    roll: Optional[str] = None
    email: Optional[str] = None
    batch: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StudentDeleteResponse(BaseModel):
    deleted: bool
