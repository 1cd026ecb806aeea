"""
Leave schemas
"""
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from leavedesk.db.base import MAX_INTEGER_ID
from leavedesk.models.leave import LeaveType, LeaveStatus


class CaptureLeaveRequest(BaseModel):
    """Schema for capturing a leave against an employee's balance"""
    employee_id: int = Field(..., gt=0, le=MAX_INTEGER_ID, description="Employee taking the leave")
    leave_type: LeaveType = Field(..., description="Type of leave")
    start_date: date = Field(..., description="First day of leave")
    end_date: date = Field(..., description="Last day of leave (inclusive)")
    status: LeaveStatus = Field(LeaveStatus.PENDING, description="Status recorded on the leave")
    approved_by_id: int = Field(..., gt=0, le=MAX_INTEGER_ID, description="Employee id of the approving manager")
    reason: Optional[str] = Field(None, max_length=500, description="Reason for leave")

    @model_validator(mode="after")
    def validate_dates(self) -> "CaptureLeaveRequest":
        if self.end_date < self.start_date:
            raise ValueError("End date cannot be before start date")
        return self


class LeaveOut(BaseModel):
    id: int
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    status: LeaveStatus
    approved_by_id: Optional[int] = None
    reason: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
