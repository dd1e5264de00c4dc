from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime, Date, ForeignKey, func
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import relationship

from rollcall.database import Base
from rollcall.models.student import NameType


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class AttendanceDay(Base):
    __tablename__ = "attendance_days"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    date = Column(Date, nullable=False, unique=True, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    records = relationship(
        "AttendanceEntry",
        order_by="AttendanceEntry.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class AttendanceEntry(Base):
    __tablename__ = "attendance_entries"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    day_id = Column(Integer, ForeignKey("attendance_days.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    # Plain string: entries outlive the student rows they name
    name = Column(NameType, nullable=False, index=True)
    status = Column(
        SQLEnum(
            AttendanceStatus,
            name="attendance_status",
            native_enum=False,
            length=16,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
