import logging
import math
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from rollcall.core.exceptions import BadRequest
from rollcall.models.attendance import AttendanceDay, AttendanceEntry, AttendanceStatus
from rollcall.schemas.attendance import AttendanceEntrySchema

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def parse_day(value: str) -> date:
    """Parse a YYYY-MM-DD string, raising BadRequest when it is malformed"""
    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        parsed = None

    # strptime also takes unpadded months and days
    if parsed is None or parsed.strftime(DATE_FORMAT) != value:
        raise BadRequest(f"Invalid date '{value}', expected YYYY-MM-DD")
    return parsed


def calculate_percentage(present: int, total: int) -> float:
    """
    Percentage of present days rounded to two decimals, halves rounded up.
    Returns 0 when nothing has been recorded.
    """
    if not total:
        return 0
    return math.floor(present / total * 10000 + 0.5) / 100


def summarize_attendance(name: str, days: Iterable[AttendanceDay]) -> Dict:
    """
    Build the attendance summary for one student.

    Only the first entry carrying the name counts for each day; days without
    an entry for the name are skipped. Days are expected in ascending order.
    """
    present = 0
    total = 0
    history = []

    for day in days:
        entry = next((record for record in day.records if record.name == name), None)
        if entry is None:
            continue

        total += 1
        if entry.status == AttendanceStatus.PRESENT:
            present += 1
        history.append({"date": day.date, "status": entry.status})

    return {
        "name": name,
        "present": present,
        "total": total,
        "percentage": calculate_percentage(present, total),
        "history": history,
    }


async def get_attendance_day(db: AsyncSession, day: date) -> Optional[AttendanceDay]:
    """Get the stored attendance day, or None"""
    result = await db.execute(select(AttendanceDay).where(AttendanceDay.date == day))
    return result.scalar_one_or_none()


async def upsert_attendance_day(
        db: AsyncSession,
        day_value: Optional[str],
        records: Optional[List[AttendanceEntrySchema]]
) -> AttendanceDay:
    """
    Store the full record list for a date.

    An existing day keeps its row but its entries are replaced wholesale;
    students missing from the new list lose their status for that date.

    Raises:
        BadRequest: If date is missing/malformed or records is not a list
    """
    if not day_value or records is None:
        raise BadRequest("date and records[] required")

    day = parse_day(day_value)

    try:
        attendance_day = await get_attendance_day(db, day)
        if attendance_day is None:
            logger.debug(f"Creating attendance day {day.isoformat()}")
            attendance_day = AttendanceDay(date=day)
            db.add(attendance_day)
        else:
            logger.debug(f"Replacing {len(attendance_day.records)} entries for {day.isoformat()}")
            # Collection change alone does not touch the parent row
            attendance_day.updated_at = func.now()

        attendance_day.records = [
            AttendanceEntry(position=position, name=record.name, status=record.status)
            for position, record in enumerate(records)
        ]

        await db.commit()
        await db.refresh(attendance_day, ["created_at", "updated_at", "records"])

    except SQLAlchemyError as e:
        logger.error(f"Database error storing attendance for {day.isoformat()}: {str(e)}", exc_info=True)
        await db.rollback()
        raise

    logger.info(f"Attendance stored for {day.isoformat()}: {len(records)} records")
    return attendance_day


async def get_days_for_student(db: AsyncSession, name: str) -> List[AttendanceDay]:
    """Every day with at least one entry for the name, oldest first"""
    query = (
        select(AttendanceDay)
        .where(AttendanceDay.records.any(AttendanceEntry.name == name))
        .order_by(AttendanceDay.date.asc())
    )
    result = await db.execute(query)
    return result.scalars().all()


async def get_attendance_history(db: AsyncSession, name: str) -> Dict:
    """Recompute the student's summary from the full ledger"""
    days = await get_days_for_student(db, name)
    logger.debug(f"Found {len(days)} attendance days for {name}")
    return summarize_attendance(name, days)
