"""
Tests for the leave-info write path
"""
import pytest
from datetime import date
from leavedesk.core.exceptions import NegativeBalanceError
from leavedesk.models.leave import Leave, LeaveStatus, LeaveType
from leavedesk.services import balance_service


def test_get_balance_unmapped_type_is_zero(make_employee):
    """A leave type missing from the map has no balance"""
    employee = make_employee(leave_info={"SICK": 4})
    assert balance_service.get_balance(employee, LeaveType.SICK) == 4
    assert balance_service.get_balance(employee, LeaveType.PTO) == 0


def test_set_balance_rejects_negative_value(make_employee):
    """Negative balances are never stored"""
    employee = make_employee(leave_info={"SICK": 1})

    with pytest.raises(NegativeBalanceError):
        balance_service.set_balance(employee, LeaveType.SICK, -1)

    assert employee.leave_info == {"SICK": 1}


def test_set_balance_allows_zero(make_employee):
    employee = make_employee(leave_info={"SICK": 3})
    balance_service.set_balance(employee, LeaveType.SICK, 0)
    assert employee.leave_info["SICK"] == 0


def test_set_balance_replaces_map(make_employee):
    """The map is replaced so the JSON column is flagged dirty"""
    employee = make_employee(leave_info={"SICK": 3})
    before = employee.leave_info

    balance_service.set_balance(employee, LeaveType.PTO, 5)

    assert employee.leave_info is not before
    assert employee.leave_info == {"SICK": 3, "PTO": 5}


def test_reset_leave_info_zeroes_every_type(make_employee):
    employee = make_employee(leave_info={"SICK": 9})
    balance_service.reset_leave_info(employee)
    assert employee.leave_info == {t.value: 0 for t in LeaveType}


def test_apply_capture_writes_balance_and_bumps_version(db, make_employee):
    """Writing the new balance flushes the employee with a new version"""
    employee = make_employee(leave_info={"SICK": 10})
    assert employee.version_id == 1
    leave = Leave(
        employee_id=employee.id,
        leave_type=LeaveType.SICK,
        start_date=date(2025, 5, 1),
        end_date=date(2025, 5, 2),
        status=LeaveStatus.PENDING,
        approved_by_id=employee.id,
    )

    balance_service.apply_capture(db, employee, leave, 8)

    assert employee.leave_info["SICK"] == 8
    assert employee.version_id == 2
