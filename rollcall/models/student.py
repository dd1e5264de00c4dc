from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.dialects import mysql

from rollcall.database import Base

# Case-sensitive comparison and ordering on MySQL, plain VARCHAR elsewhere
NameType = String(255).with_variant(mysql.VARCHAR(255, collation="utf8mb4_bin"), "mysql")


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(NameType, nullable=False, unique=True, index=True)
    roll = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    batch = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
