"""
Demo data generation - random employees, leaves and login accounts
"""
import logging
import random
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from leavedesk.core.security import hash_password
from leavedesk.db.session import unit_of_work
from leavedesk.models.employee import Employee
from leavedesk.models.leave import Leave, LeaveStatus, LeaveType
from leavedesk.models.user import Role, User
from leavedesk.services import balance_service
from leavedesk.services.leave_service import get_manager_of_record_id

logger = logging.getLogger(__name__)

FIRST_NAMES = ["John", "Emily", "Michael", "Sarah", "William", "Olivia", "James", "Ava", "Robert", "Isabella"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Jones", "Brown", "Davis", "Miller", "Wilson", "Moore", "Taylor"]
STREET_NAMES = ["Main St", "Park Ave", "Elm St", "Oak St", "Maple St", "Pine St", "Cedar St", "Spruce St", "Fir St", "Cypress St"]
CITY_NAMES = ["New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia", "San Antonio", "San Diego", "Dallas", "San Jose"]
REGION_NAMES = ["NY", "CA", "IL", "TX", "AZ", "PA", "TX", "CA", "TX", "CA"]
COUNTRY_NAMES = ["France", "US", "UK", "Tuvalu", "Lesotho", "Kyrgyzstan", "Nepal", "Luxembourg", "Dominica", "Martinique"]
ZIP_CODES = ["10001", "90001", "60001", "77001", "85001", "19101", "78201", "92101", "75201", "95101"]

LEAVE_PERIOD_STARTING_DATE = date(2025, 1, 1)
LEAVE_PERIOD_DAYS = 365
MAX_GENERATED_BALANCE = 30


def _random_phone_number(rng: random.Random) -> str:
    return f"{rng.randrange(1000):03d}-{rng.randrange(1000):03d}-{rng.randrange(10000):04d}"


def _unique_phone_number(db: Session, rng: random.Random, taken: set) -> str:
    while True:
        phone = _random_phone_number(rng)
        if phone in taken:
            continue
        if db.query(Employee.id).filter(Employee.phone_number == phone).first() is None:
            taken.add(phone)
            return phone


def _random_employee(db: Session, rng: random.Random, manager: Optional[Employee], taken: set) -> Employee:
    first_name = rng.choice(FIRST_NAMES)
    last_name = rng.choice(LAST_NAMES)
    employee = Employee(
        first_name=first_name,
        last_name=last_name,
        phone_number=_unique_phone_number(db, rng, taken),
        street=rng.choice(STREET_NAMES),
        city=rng.choice(CITY_NAMES),
        region=rng.choice(REGION_NAMES),
        country=rng.choice(COUNTRY_NAMES),
        zip_code=rng.choice(ZIP_CODES),
        block=f"{chr(ord('A') + rng.randrange(26))}{rng.randrange(20) + 1}",
        building=str(rng.randrange(200) + 1),
        floor=rng.randrange(40),
        email=f"{first_name.lower()}.{last_name.lower()}@em.com",
        hire_date=date.today(),
        job_id=str(rng.randrange(1000)),
        salary=rng.randrange(100000),
        manager_id=manager.id if manager is not None else None,
    )
    for leave_type in LeaveType:
        balance_service.set_balance(employee, leave_type, rng.randint(0, MAX_GENERATED_BALANCE))
    return employee


def generate_employees(db: Session, num_employees: int, rng: random.Random) -> List[Tuple[Employee, Optional[Employee]]]:
    """
    Create a reporting chain of random employees

    Each generated employee reports to the one generated before it; the first
    one has no manager.

    Returns:
        List of (employee, manager) pairs in creation order
    """
    result = []
    taken: set = set()
    manager = None
    for _ in range(num_employees):
        employee = _random_employee(db, rng, manager, taken)
        db.add(employee)
        db.flush()
        result.append((employee, manager))
        manager = employee
    return result


def generate_leave(db: Session, employee: Employee, rng: random.Random) -> Leave:
    """
    Create one random leave for the employee

    Only APPROVED leaves carry an approver, who is the employee's manager-of-record.
    Balances are not touched.
    """
    status = rng.choice(list(LeaveStatus))
    start_date = LEAVE_PERIOD_STARTING_DATE + timedelta(days=rng.randrange(LEAVE_PERIOD_DAYS))
    end_date = start_date + timedelta(days=rng.randrange(LEAVE_PERIOD_DAYS))
    leave = Leave(
        employee_id=employee.id,
        leave_type=rng.choice(list(LeaveType)),
        start_date=start_date,
        end_date=end_date,
        status=status,
        approved_by_id=get_manager_of_record_id(employee) if status == LeaveStatus.APPROVED else None,
    )
    db.add(leave)
    return leave


def generate_users(db: Session, role: Role, username_prefix: str, password_prefix: str, count: int) -> Tuple[int, int]:
    """
    Create ``<prefix>1..<prefix>N`` accounts, skipping usernames that already exist

    Returns:
        Tuple of (added, skipped)
    """
    logger.info("Attempting to add %s users with role %s", count, role.value)
    added = skipped = 0
    for i in range(1, count + 1):
        username = f"{username_prefix}{i}"
        if db.query(User.id).filter(User.username == username).first() is not None:
            logger.warning("Username '%s' already exists. Skipping.", username)
            skipped += 1
            continue
        db.add(User(username=username, password_hash=hash_password(f"{password_prefix}{i}"), role=role))
        added += 1
    db.flush()
    logger.info("Finished adding %s users. Added: %s, Skipped: %s", role.value.lower(), added, skipped)
    return added, skipped


def seed_demo_data(
    db: Session,
    num_employees: int = 20,
    leaves_per_employee: int = 20,
    num_users: int = 10,
    num_admins: int = 10,
    seed: Optional[int] = None,
) -> Dict[str, int]:
    """
    Fill the database with random demo data in one transaction

    Args:
        db: Database session
        num_employees: Employees in the generated reporting chain
        leaves_per_employee: Random leaves per employee
        num_users: USER accounts (user1/password1, ...)
        num_admins: ADMIN accounts (admin1/adminpass1, ...)
        seed: Random seed for reproducible data

    Returns:
        Counts of created records
    """
    rng = random.Random(seed)
    with unit_of_work(db):
        pairs = generate_employees(db, num_employees, rng)
        for employee, _manager in pairs:
            for _ in range(leaves_per_employee):
                generate_leave(db, employee, rng)
        users_added, _ = generate_users(db, Role.USER, "user", "password", num_users)
        admins_added, _ = generate_users(db, Role.ADMIN, "admin", "adminpass", num_admins)

    summary = {
        "employees": len(pairs),
        "leaves": len(pairs) * leaves_per_employee,
        "users": users_added,
        "admins": admins_added,
    }
    logger.info("Demo data generated: %s", summary)
    return summary
