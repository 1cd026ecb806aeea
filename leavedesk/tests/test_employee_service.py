"""
Tests for onboarding, rejoin detection and name search
"""
import pytest
from datetime import date
from sqlalchemy import event
from leavedesk.models.employee import Employee
from leavedesk.models.leave import LeaveType
from leavedesk.services import employee_service


def test_new_employee_gets_zero_balance_for_every_type(db, onboard_request):
    """A new hire starts with 0 days of every leave type"""
    employee = employee_service.onboard(db, onboard_request())
    db.commit()

    assert employee.id is not None
    assert employee.leave_info == {t.value: 0 for t in LeaveType}
    assert employee.first_name == "Jane"
    assert employee.city == "Springfield"
    assert employee.hire_date == date(2024, 3, 1)


def test_new_employee_linked_to_existing_manager(db, make_employee, onboard_request):
    manager = make_employee()
    employee = employee_service.onboard(db, onboard_request(manager_id=manager.id))
    db.commit()
    assert employee.manager_id == manager.id
    assert employee.manager is manager


def test_unknown_manager_onboards_without_manager(db, onboard_request):
    """A manager id that does not resolve is treated as no manager"""
    employee = employee_service.onboard(db, onboard_request(manager_id=999))
    db.commit()
    assert employee.manager_id is None


@pytest.mark.parametrize("manager_id", [2**40, -1])
def test_out_of_range_manager_id_is_not_looked_up(db, onboard_request, manager_id):
    """Ids an INTEGER column cannot hold mean no manager, without querying"""
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(parameters)

    bind = db.get_bind()
    event.listen(bind, "before_cursor_execute", record)
    try:
        employee = employee_service.onboard(db, onboard_request(manager_id=manager_id))
        db.commit()
    finally:
        event.remove(bind, "before_cursor_execute", record)

    assert employee.manager_id is None
    assert not any(manager_id in tuple(p) for p in statements if isinstance(p, (tuple, list)))


def test_rejoin_overwrites_job_info_and_address(db, make_employee, onboard_request):
    """Same phone number updates the existing record instead of adding one"""
    original = employee_service.onboard(db, onboard_request())
    db.commit()
    original.leave_info = {"PTO": 7, "SICK": 2, "MATERNITY": 0}
    db.commit()
    manager = make_employee()

    rejoined = employee_service.onboard(db, onboard_request(
        first_name="Janet",
        last_name="Smith",
        city="Shelbyville",
        street="Oak Ave 9",
        job_id="MGR2",
        salary=9000,
        email="janet@example.com",
        manager_id=manager.id,
    ))
    db.commit()

    assert rejoined.id == original.id
    assert db.query(Employee).filter(Employee.phone_number == "+1 555-123-4567").count() == 1
    # Job info and address replaced
    assert rejoined.city == "Shelbyville"
    assert rejoined.street == "Oak Ave 9"
    assert rejoined.job_id == "MGR2"
    assert rejoined.salary == 9000
    assert rejoined.email == "janet@example.com"
    assert rejoined.manager_id == manager.id
    # Names and balances kept
    assert rejoined.first_name == "Jane"
    assert rejoined.last_name == "Doe"
    assert rejoined.leave_info == {"PTO": 7, "SICK": 2, "MATERNITY": 0}


def test_different_phone_creates_second_employee(db, onboard_request):
    employee_service.onboard(db, onboard_request())
    employee_service.onboard(db, onboard_request(phone_number="+1 555-999-0000"))
    db.commit()
    assert db.query(Employee).count() == 2


def test_search_matches_first_or_last_name_case_insensitive(db, make_employee):
    make_employee(first_name="Alice", last_name="Walker")
    make_employee(first_name="Bob", last_name="Alicia")
    make_employee(first_name="Carol", last_name="Stone")

    results = employee_service.search_by_name(db, "ALIC")

    assert [(e.first_name, e.last_name) for e in results] == [
        ("Bob", "Alicia"),
        ("Alice", "Walker"),
    ]


def test_search_paginates(db, make_employee):
    for i in range(5):
        make_employee(first_name="Sam", last_name=f"Person{i}")

    first = employee_service.search_by_name(db, "sam", page=0, size=2)
    third = employee_service.search_by_name(db, "sam", page=2, size=2)
    beyond = employee_service.search_by_name(db, "sam", page=3, size=2)

    assert [e.last_name for e in first] == ["Person0", "Person1"]
    assert [e.last_name for e in third] == ["Person4"]
    assert beyond == []


def test_search_treats_wildcards_literally(db, make_employee):
    """% and _ in the search text match only themselves"""
    make_employee(first_name="Anna", last_name="Lee")
    assert employee_service.search_by_name(db, "%%%") == []
    assert employee_service.search_by_name(db, "___") == []
