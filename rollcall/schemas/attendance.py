import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from rollcall.models.attendance import AttendanceStatus


class AttendanceEntrySchema(BaseModel):
    name: str = Field(..., min_length=1)
    status: AttendanceStatus

    class Config:
        from_attributes = True


class AttendanceSubmit(BaseModel):
    """Body of POST /attendance: the full list for one day"""
    date: Optional[str] = None
    records: Optional[List[AttendanceEntrySchema]] = None


class AttendanceDayResponse(BaseModel):
    date: dt.date
    records: List[AttendanceEntrySchema] = []
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class HistoryItem(BaseModel):
    date: dt.date
    status: AttendanceStatus


class AttendanceSummary(BaseModel):
    name: str
    present: int = 0
    total: int = 0
    percentage: float = 0
    history: List[HistoryItem] = []
