"""
Database models
"""
from leavedesk.models.user import User, Role
from leavedesk.models.employee import Employee
from leavedesk.models.leave import Leave, LeaveType, LeaveStatus

__all__ = [
    "User",
    "Role",
    "Employee",
    "Leave",
    "LeaveType",
    "LeaveStatus",
]
