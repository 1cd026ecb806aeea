"""
Employee onboarding endpoint
"""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from leavedesk.core.deps import get_db, get_current_user
from leavedesk.models.user import User
from leavedesk.schemas.employee import EmployeeOut, OnboardEmployeeRequest
from leavedesk.services import workflow_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def onboard_employee_endpoint(
    employee_data: OnboardEmployeeRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Onboard a new employee or update a rejoining one (ADMIN-only)

    An employee whose phone number is already on record is updated in place:
    job info and address are replaced, leave balances are kept.
    """
    logger.info("Received request to onboard employee: %s %s", employee_data.first_name, employee_data.last_name)
    employee = workflow_service.onboard(db, employee_data, current_user.username)
    return EmployeeOut.from_employee(employee)
