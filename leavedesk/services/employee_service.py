"""
Employee service - onboarding, rejoin detection, lookup and name search
"""
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from leavedesk.core.exceptions import ResourceNotFoundError
from leavedesk.db.base import MAX_INTEGER_ID
from leavedesk.models.employee import Employee
from leavedesk.schemas.employee import OnboardEmployeeRequest
from leavedesk.services import balance_service

logger = logging.getLogger(__name__)


def find_employee_by_phone(db: Session, phone_number: str) -> Optional[Employee]:
    return db.query(Employee).filter(Employee.phone_number == phone_number).first()


def get_employee(db: Session, employee_id: int, for_update: bool = False) -> Employee:
    """
    Get an employee by id

    Args:
        db: Database session
        employee_id: Employee ID
        for_update: Lock the row until the transaction ends (ignored by SQLite)

    Raises:
        ResourceNotFoundError: If no employee has this id
    """
    query = db.query(Employee).filter(Employee.id == employee_id)
    if for_update:
        query = query.with_for_update()
    employee = query.first()
    if employee is None:
        raise ResourceNotFoundError(f"Employee not found with ID: {employee_id}")
    return employee


def _resolve_manager(db: Session, manager_id: Optional[int]) -> Optional[Employee]:
    """Look up the manager; an id that does not resolve means no manager"""
    if manager_id is None:
        return None
    if not 0 < manager_id <= MAX_INTEGER_ID:
        logger.warning("Manager id %s is out of range, onboarding employee without a manager", manager_id)
        return None
    manager = db.query(Employee).filter(Employee.id == manager_id).first()
    if manager is None:
        logger.warning("Manager %s not found, onboarding employee without a manager", manager_id)
    return manager


def fill_job_info(employee: Employee, data: OnboardEmployeeRequest, manager: Optional[Employee]) -> Employee:
    employee.email = data.email
    employee.hire_date = data.hire_date
    employee.job_id = data.job_id
    employee.salary = data.salary
    employee.manager_id = manager.id if manager is not None else None
    return employee


def fill_address(employee: Employee, data: OnboardEmployeeRequest) -> Employee:
    employee.street = data.street
    employee.city = data.city
    employee.region = data.region
    employee.country = data.country
    employee.zip_code = data.zip_code
    employee.block = data.block
    employee.building = data.building
    employee.apartment = data.apartment
    employee.floor = data.floor
    return employee


def onboard(db: Session, data: OnboardEmployeeRequest) -> Employee:
    """
    Create an employee, or update the existing one with the same phone number

    A rejoining employee gets job info and address overwritten; names and
    leave balances are kept. A new employee starts with a zero balance for
    every leave type. Authorization is checked by the caller.

    Args:
        db: Database session (flushed here, committed by the caller)
        data: Onboarding data

    Returns:
        The persisted Employee
    """
    existing = find_employee_by_phone(db, data.phone_number)
    manager = _resolve_manager(db, data.manager_id)

    if existing is not None:
        logger.info("Employee is rejoining, updating record with ID: %s", existing.id)
        fill_job_info(existing, data, manager)
        fill_address(existing, data)
        db.flush()
        return existing

    logger.info("Creating new employee record")
    employee = Employee(
        first_name=data.first_name,
        last_name=data.last_name,
        phone_number=data.phone_number,
    )
    fill_job_info(employee, data, manager)
    fill_address(employee, data)
    balance_service.reset_leave_info(employee)

    db.add(employee)
    db.flush()
    logger.info("Employee created successfully with ID: %s", employee.id)
    return employee


def search_by_name(db: Session, name: str, page: int = 0, size: int = 10) -> List[Employee]:
    """
    Case-insensitive substring search over first and last names

    Args:
        db: Database session
        name: Search text (already validated to at least 3 characters)
        page: Zero-based page number
        size: Page size

    Returns:
        Employees ordered by last name, first name, id
    """
    escaped = name.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"
    results = (
        db.query(Employee)
        .filter(or_(
            Employee.first_name.ilike(pattern, escape="\\"),
            Employee.last_name.ilike(pattern, escape="\\"),
        ))
        .order_by(Employee.last_name, Employee.first_name, Employee.id)
        .offset(page * size)
        .limit(size)
        .all()
    )
    logger.info("Found %s employees matching '%s' (page=%s, size=%s)", len(results), name, page, size)
    return results
