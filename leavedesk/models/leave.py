"""
Leave models
"""
from sqlalchemy import (
    Column,
    Integer,
    Date,
    DateTime,
    ForeignKey,
    Text,
    Enum as SQLEnum,
    Index,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum
from leavedesk.db.base import Base


class LeaveType(str, enum.Enum):
    PTO = "PTO"
    SICK = "SICK"
    MATERNITY = "MATERNITY"


class LeaveStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Leave(Base):
    __tablename__ = "leaves"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    leave_type = Column(SQLEnum(LeaveType), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(SQLEnum(LeaveStatus), nullable=False, default=LeaveStatus.PENDING)
    approved_by_id = Column(Integer, ForeignKey("employees.id"), nullable=True, index=True)
    reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)

    # Relationships
    employee = relationship("Employee", foreign_keys=[employee_id], back_populates="leaves")
    approved_by = relationship("Employee", foreign_keys=[approved_by_id])

    __table_args__ = (
        Index("ix_leaves_employee_dates", "employee_id", "start_date", "end_date"),
        CheckConstraint("start_date <= end_date", name="check_start_date_le_end_date"),
    )
