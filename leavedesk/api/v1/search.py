"""
Employee search endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from leavedesk.core.deps import get_db, get_current_user
from leavedesk.models.user import User
from leavedesk.schemas.employee import EmployeeOut, EmployeeSearchResponse, SearchEmployeeByNameRequest
from leavedesk.services import employee_service

router = APIRouter()


@router.post("/employees", response_model=EmployeeSearchResponse)
async def search_employees_endpoint(
    search_data: SearchEmployeeByNameRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Search employees whose first or last name contains the given text"""
    employees = employee_service.search_by_name(db, search_data.name, search_data.page, search_data.size)
    return EmployeeSearchResponse(
        page=search_data.page,
        size=search_data.size,
        items=[EmployeeOut.from_employee(e) for e in employees],
    )
