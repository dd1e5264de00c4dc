import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from rollcall.core.exceptions import InternalError
from rollcall.crud.attendance import (
    get_attendance_day,
    get_attendance_history,
    parse_day,
    upsert_attendance_day
)
from rollcall.dependencies import get_db, require_admin
from rollcall.schemas.attendance import AttendanceDayResponse, AttendanceSubmit, AttendanceSummary

# Setup logging
logger = logging.getLogger(__name__)
router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.post("", response_model=AttendanceDayResponse, dependencies=[Depends(require_admin)])
async def mark_attendance(
        payload: AttendanceSubmit,
        db: AsyncSession = Depends(get_db)
):
    """
    Record attendance for one date.

    Body: { date: "YYYY-MM-DD", records: [{ name, status: "Present"|"Absent" }] }

    The submitted list replaces whatever was stored for that date.
    """
    try:
        logger.info(f"Marking attendance for {payload.date}")
        return await upsert_attendance_day(db, payload.date, payload.records)

    except SQLAlchemyError as e:
        logger.error(f"Database error marking attendance for {payload.date}: {str(e)}", exc_info=True)
        raise InternalError(str(e))


# Declared before /{name} so a student called "date" cannot shadow it
@router.get("/date/{date_value}", response_model=AttendanceDayResponse, response_model_exclude_none=True)
async def get_attendance_for_date(
        date_value: str,
        db: AsyncSession = Depends(get_db)
):
    """Who was present or absent on a date; an empty list when nothing was recorded"""
    day = parse_day(date_value)
    try:
        attendance_day = await get_attendance_day(db, day)
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching attendance for {date_value}: {str(e)}", exc_info=True)
        raise InternalError(str(e))

    if attendance_day is None:
        return AttendanceDayResponse(date=day, records=[])
    return attendance_day


@router.get("/{name:path}", response_model=AttendanceSummary)
async def get_student_attendance(
        name: str,
        db: AsyncSession = Depends(get_db)
):
    """Attendance history and percentage for one student name"""
    try:
        return await get_attendance_history(db, name)

    except SQLAlchemyError as e:
        logger.error(f"Database error computing attendance for {name}: {str(e)}", exc_info=True)
        raise InternalError(str(e))
