"""
Tests for demo data generation
"""
from leavedesk.models.employee import Employee
from leavedesk.models.leave import Leave, LeaveStatus, LeaveType
from leavedesk.models.user import Role, User
from leavedesk.services import data_service
from leavedesk.services.user_service import ensure_initial_admin


def test_seed_demo_data_counts(db):
    summary = data_service.seed_demo_data(
        db, num_employees=4, leaves_per_employee=3, num_users=2, num_admins=1, seed=7
    )

    assert summary == {"employees": 4, "leaves": 12, "users": 2, "admins": 1}
    assert db.query(Employee).count() == 4
    assert db.query(Leave).count() == 12
    assert db.query(User).filter(User.role == Role.USER).count() == 2
    assert db.query(User).filter(User.username == "admin1").one().role == Role.ADMIN


def test_seeded_employees_form_a_reporting_chain(db):
    data_service.seed_demo_data(db, num_employees=3, leaves_per_employee=0, num_users=0, num_admins=0, seed=1)

    employees = db.query(Employee).order_by(Employee.id).all()
    assert employees[0].manager_id is None
    assert employees[1].manager_id == employees[0].id
    assert employees[2].manager_id == employees[1].id
    for employee in employees:
        assert set(employee.leave_info) == {t.value for t in LeaveType}
        assert all(0 <= v <= data_service.MAX_GENERATED_BALANCE for v in employee.leave_info.values())
    assert len({e.phone_number for e in employees}) == 3


def test_seeded_leaves_respect_approver_rule(db):
    data_service.seed_demo_data(db, num_employees=3, leaves_per_employee=10, num_users=0, num_admins=0, seed=3)

    for leave in db.query(Leave).all():
        assert leave.start_date <= leave.end_date
        if leave.status == LeaveStatus.APPROVED:
            employee = db.get(Employee, leave.employee_id)
            assert leave.approved_by_id == (employee.manager_id or employee.id)
        else:
            assert leave.approved_by_id is None


def test_existing_usernames_are_skipped(db):
    data_service.seed_demo_data(db, num_employees=0, leaves_per_employee=0, num_users=2, num_admins=0)
    added, skipped = data_service.generate_users(db, Role.USER, "user", "password", 3)
    assert (added, skipped) == (1, 2)


def test_initial_admin_created_once(db):
    assert ensure_initial_admin(db, "root", "Root@12345") is True
    assert ensure_initial_admin(db, "root", "Root@12345") is False
    assert db.query(User).filter(User.role == Role.ADMIN).count() == 1
