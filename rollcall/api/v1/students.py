import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from rollcall.core.exceptions import InternalError
from rollcall.crud.student import create_student, delete_student_by_name, list_students
from rollcall.dependencies import get_db, require_admin
from rollcall.schemas.student_schema import StudentCreate, StudentDeleteResponse, StudentResponse

# Setup logger
logger = logging.getLogger(__name__)

str_router = APIRouter(prefix="/students", tags=["students"])


@str_router.get("", response_model=List[StudentResponse])
async def get_students(db: AsyncSession = Depends(get_db)):
    """
    List the whole roster sorted by name. Filtering is left to the client.
    """
    try:
        students = await list_students(db)
        logger.debug(f"Returning {len(students)} students")
        return students

    except SQLAlchemyError as e:
        logger.error(f"Database error listing students: {str(e)}", exc_info=True)
        raise InternalError(str(e))


@str_router.post("", response_model=StudentResponse, dependencies=[Depends(require_admin)])
async def add_student(
        student: StudentCreate,
        db: AsyncSession = Depends(get_db)
):
    """
    Add a student to the roster.

    - **name**: required, unique
    - **roll**, **email**: optional
    - **batch**: optional, defaults to the configured cohort
    """
    try:
        logger.info(f"Creating student: {student.name}")
        return await create_student(db, student)

    except SQLAlchemyError as e:
        logger.error(f"Database error creating student {student.name}: {str(e)}", exc_info=True)
        raise InternalError(str(e))


@str_router.delete("/{name:path}", response_model=StudentDeleteResponse, dependencies=[Depends(require_admin)])
async def remove_student(
        name: str,
        db: AsyncSession = Depends(get_db)
):
    """
    Delete a student by name. Deleting an unknown name is not an error.
    """
    try:
        deleted = await delete_student_by_name(db, name)
        return StudentDeleteResponse(deleted=deleted)

    except SQLAlchemyError as e:
        logger.error(f"Database error deleting student {name}: {str(e)}", exc_info=True)
        raise InternalError(str(e))
