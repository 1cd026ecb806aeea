"""
Workflow service - transaction boundary for onboarding and leave capture

The API layer calls these two functions only. Each runs its writes in a
single unit of work: either everything is committed or nothing is.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from leavedesk.core.config import settings
from leavedesk.core.exceptions import ConcurrentUpdateError
from leavedesk.db.session import unit_of_work
from leavedesk.models.employee import Employee
from leavedesk.models.leave import Leave
from leavedesk.schemas.employee import OnboardEmployeeRequest
from leavedesk.schemas.leave import CaptureLeaveRequest
from leavedesk.services import balance_service, employee_service, leave_service, user_service

logger = logging.getLogger(__name__)


def onboard(db: Session, data: OnboardEmployeeRequest, acting_username: Optional[str]) -> Employee:
    """
    Onboard or rejoin an employee on behalf of an ADMIN user

    Raises:
        UnauthorizedError: If the acting user is missing or not ADMIN
    """
    logger.info("Processing onboarding for employee: %s %s", data.first_name, data.last_name)

    try:
        with unit_of_work(db):
            user_service.verify_admin_user(db, acting_username)
            employee = employee_service.onboard(db, data)
    except IntegrityError:
        # Another request created this phone number first; run again as a rejoin
        logger.warning("Phone number %s was onboarded concurrently, retrying as rejoin", data.phone_number)
        with unit_of_work(db):
            user_service.verify_admin_user(db, acting_username)
            employee = employee_service.onboard(db, data)

    db.refresh(employee)
    return employee


def capture_leave(db: Session, data: CaptureLeaveRequest, max_retries: Optional[int] = None) -> Leave:
    """
    Record a leave and deduct it from the employee's balance atomically

    The Leave insert and the balance update commit together. If the employee
    row is changed by someone else before the commit, the whole capture is
    rolled back and re-run against fresh data.

    Args:
        db: Database session
        data: Capture request
        max_retries: Attempts before giving up (defaults to settings.CAPTURE_MAX_RETRIES)

    Returns:
        The committed Leave

    Raises:
        ResourceNotFoundError: Unknown employee
        LeaveNotApprovedByManagerError: Approver is not the manager-of-record
        InsufficientLeaveBalanceError: Not enough balance for the leave type
        ConcurrentUpdateError: Every attempt hit a concurrent update
    """
    logger.info(
        "Processing leave request for employee ID: %s, type: %s",
        data.employee_id, data.leave_type.value
    )
    attempts = max_retries or settings.CAPTURE_MAX_RETRIES

    for attempt in range(1, attempts + 1):
        try:
            with unit_of_work(db):
                employee = employee_service.get_employee(db, data.employee_id, for_update=True)
                leave, new_balance = leave_service.capture(db, data, employee)
                balance_service.apply_capture(db, employee, leave, new_balance)
        except StaleDataError:
            logger.warning(
                "Employee %s changed during leave capture (attempt %s/%s)",
                data.employee_id, attempt, attempts
            )
            continue

        db.refresh(leave)
        return leave

    raise ConcurrentUpdateError(
        f"Employee {data.employee_id} was updated concurrently; leave not captured"
    )
