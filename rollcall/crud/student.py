import logging
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from rollcall.config import settings
from rollcall.core.exceptions import BadRequest, Conflict
from rollcall.models.student import Student
from rollcall.schemas.student_schema import StudentCreate

# Setup logger
logger = logging.getLogger(__name__)


async def list_students(db: AsyncSession) -> List[Student]:
    """Get every student, ordered by name ascending"""
    result = await db.execute(select(Student).order_by(Student.name.asc()))
    return result.scalars().all()


async def get_student_by_name(db: AsyncSession, name: str) -> Optional[Student]:
    """
    Get student by exact name.

    Args:
        db: Database session
        name: Student name

    Returns:
        Student instance or None
    """
    logger.debug(f"Querying student by name: {name}")
    result = await db.execute(select(Student).where(Student.name == name))
    return result.scalar_one_or_none()


async def create_student(db: AsyncSession, student: StudentCreate) -> Student:
    """
    Create a new student.

    Args:
        db: Database session
        student: Student creation data (already trimmed)

    Returns:
        Created Student instance

    Raises:
        BadRequest: If the name is missing or blank
        Conflict: If a student with the same name exists
    """
    if not student.name:
        raise BadRequest("Name is required")

    existing = await get_student_by_name(db, student.name)
    if existing:
        logger.warning(f"Student creation rejected - name already exists: {student.name}")
        raise Conflict("Student with this name already exists")

    student_data = student.model_dump()
    if student_data.get("batch") is None:
        student_data["batch"] = settings.default_batch

    db_student = Student(**student_data)

    try:
        db.add(db_student)
        await db.commit()
        await db.refresh(db_student)
    except IntegrityError:
        # Lost a race against a concurrent create with the same name
        await db.rollback()
        logger.warning(f"Student creation hit unique constraint: {student.name}")
        raise Conflict("Student with this name already exists")
    except SQLAlchemyError as e:
        logger.error(f"Database error creating student {student.name}: {str(e)}", exc_info=True)
        await db.rollback()
        raise

    logger.info(f"Student created: {db_student.name} (ID: {db_student.id})")
    return db_student


async def delete_student_by_name(db: AsyncSession, name: str) -> bool:
    """
    Delete a student by name.

    Historical attendance entries for the name are left in place.

    Returns:
        True if a row was removed, False if no such student existed
    """
    try:
        result = await db.execute(delete(Student).where(Student.name == name))
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Database error deleting student {name}: {str(e)}", exc_info=True)
        await db.rollback()
        raise

    deleted = (result.rowcount or 0) > 0
    if deleted:
        logger.info(f"Student deleted: {name}")
    else:
        logger.debug(f"No student to delete with name: {name}")
    return deleted
