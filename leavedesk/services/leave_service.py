"""
Leave service - admissibility checks and leave capture
"""
import logging
from datetime import date
from typing import Tuple

from sqlalchemy.orm import Session

from leavedesk.core.exceptions import (
    InsufficientLeaveBalanceError,
    LeaveNotApprovedByManagerError,
)
from leavedesk.models.employee import Employee
from leavedesk.models.leave import Leave
from leavedesk.schemas.leave import CaptureLeaveRequest
from leavedesk.services import balance_service
from leavedesk.utils.enums import enum_to_str

logger = logging.getLogger(__name__)


def get_leave_days(start_date: date, end_date: date) -> int:
    """
    Number of leave days between start_date and end_date, both inclusive.

    Plain calendar days: weekends and holidays are counted.
    A single-day leave (start_date == end_date) costs 1 day.
    """
    return (end_date - start_date).days + 1


def get_manager_of_record_id(employee: Employee) -> int:
    """The employee's manager id, or the employee's own id when there is no manager"""
    return employee.manager_id if employee.manager_id is not None else employee.id


def verify_approver(employee: Employee, approved_by_id: int) -> int:
    """
    Check that the leave was approved by the employee's manager-of-record

    Returns:
        The manager-of-record id

    Raises:
        LeaveNotApprovedByManagerError: If approved_by_id is anyone else
    """
    manager_id = get_manager_of_record_id(employee)
    if manager_id != approved_by_id:
        raise LeaveNotApprovedByManagerError(
            f"Manager: {manager_id} is different from the one who approved leave: {approved_by_id}"
        )
    return manager_id


def capture(db: Session, data: CaptureLeaveRequest, employee: Employee) -> Tuple[Leave, int]:
    """
    Validate a leave request and persist the Leave

    Checks the approver first, then the balance for the requested type.
    Nothing is written when either check fails. The employee's balance is
    not touched here; the caller applies the returned balance.

    Args:
        db: Database session (flushed here, committed by the caller)
        data: Capture request
        employee: Employee the leave is for

    Returns:
        Tuple of (persisted Leave, balance after deducting the leave days)

    Raises:
        LeaveNotApprovedByManagerError: Approver is not the manager-of-record
        InsufficientLeaveBalanceError: Balance is lower than the leave days
    """
    leave_days = get_leave_days(data.start_date, data.end_date)
    manager_id = verify_approver(employee, data.approved_by_id)

    balance = balance_service.get_balance(employee, data.leave_type)
    if balance < leave_days:
        logger.warning("Requested %s days but only %s available", leave_days, balance)
        raise InsufficientLeaveBalanceError(
            f"Insufficient leave balance. Available: {balance}, Requested: {leave_days}"
        )

    leave = Leave(
        employee_id=employee.id,
        leave_type=data.leave_type,
        start_date=data.start_date,
        end_date=data.end_date,
        status=data.status,
        approved_by_id=manager_id,
        reason=data.reason,
    )
    db.add(leave)
    db.flush()
    logger.info(
        "Leave %s recorded: employee_id=%s type=%s days=%s",
        leave.id, employee.id, enum_to_str(data.leave_type), leave_days
    )
    return leave, balance - leave_days
