"""
Balance service - the single write path for an employee's leave-info map
"""
import logging
from typing import Dict

from sqlalchemy.orm import Session

from leavedesk.core.exceptions import NegativeBalanceError
from leavedesk.models.employee import Employee
from leavedesk.models.leave import Leave, LeaveType
from leavedesk.utils.enums import enum_to_str

logger = logging.getLogger(__name__)


def get_balance(employee: Employee, leave_type: LeaveType) -> int:
    """
    Remaining days of ``leave_type`` for the employee.

    A leave type missing from the map counts as a zero balance.
    """
    leave_info = employee.leave_info or {}
    return int(leave_info.get(enum_to_str(leave_type), 0))


def set_balance(employee: Employee, leave_type: LeaveType, value: int) -> None:
    """
    Store ``value`` as the employee's balance for ``leave_type``.

    Every leave-info mutation goes through here. The map is replaced rather
    than edited in place so SQLAlchemy sees the JSON column as dirty and the
    employee's version counter is bumped on flush.

    Raises:
        NegativeBalanceError: If value is below zero
    """
    if value < 0:
        raise NegativeBalanceError(
            f"Balance for {enum_to_str(leave_type)} cannot be negative (got {value})"
        )
    leave_info: Dict[str, int] = dict(employee.leave_info or {})
    leave_info[enum_to_str(leave_type)] = int(value)
    employee.leave_info = leave_info


def reset_leave_info(employee: Employee) -> None:
    """Zero the balance of every leave type"""
    employee.leave_info = {}
    for leave_type in LeaveType:
        set_balance(employee, leave_type, 0)


def apply_capture(db: Session, employee: Employee, leave: Leave, new_balance: int) -> Employee:
    """
    Write the post-capture balance back onto the employee.

    Runs inside the caller's transaction; the flush raises ``StaleDataError``
    when another writer changed the employee row since it was loaded.

    Args:
        db: Database session
        employee: Employee the leave was captured for
        leave: Leave returned by leave_service.capture
        new_balance: Balance returned by leave_service.capture

    Returns:
        The updated employee (flushed, not committed)
    """
    old_balance = get_balance(employee, leave.leave_type)
    set_balance(employee, leave.leave_type, new_balance)
    db.add(employee)
    db.flush()
    logger.info(
        "Leave balance updated: employee_id=%s type=%s %s -> %s",
        employee.id, enum_to_str(leave.leave_type), old_balance, new_balance
    )
    return employee
