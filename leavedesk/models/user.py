"""
User model (login accounts)
"""
from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
import enum
from leavedesk.db.base import Base


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(100), nullable=False)
    role = Column(SQLEnum(Role), nullable=False, default=Role.USER)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
