"""
Employee model
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from leavedesk.db.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False, index=True)
    phone_number = Column(String(20), unique=True, nullable=False, index=True)

    # Address
    street = Column(String(100), nullable=True)
    city = Column(String(50), nullable=True)
    region = Column(String(50), nullable=True)
    country = Column(String(50), nullable=True)
    zip_code = Column(String(10), nullable=True)
    block = Column(String(10), nullable=True)
    building = Column(String(10), nullable=True)
    apartment = Column(String(10), nullable=True)
    floor = Column(Integer, nullable=True)

    # Job info
    email = Column(String(100), nullable=True)
    hire_date = Column(Date, nullable=True)
    job_id = Column(String(10), nullable=True)
    salary = Column(Integer, nullable=True)
    manager_id = Column(Integer, ForeignKey("employees.id"), nullable=True, index=True)

    # Leave type value -> remaining days; write through balance_service.set_balance only
    leave_info = Column(JSON, nullable=False, default=dict)

    version_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)

    # Relationships
    manager = relationship("Employee", remote_side=[id], backref="direct_reports")
    leaves = relationship("Leave", foreign_keys="Leave.employee_id", back_populates="employee")

    __mapper_args__ = {"version_id_col": version_id}
