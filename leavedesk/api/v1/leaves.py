"""
Leave endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from leavedesk.core.deps import get_db, get_current_user
from leavedesk.models.user import User
from leavedesk.schemas.leave import CaptureLeaveRequest, LeaveOut
from leavedesk.services import workflow_service

router = APIRouter()


@router.post("", response_model=LeaveOut, status_code=status.HTTP_201_CREATED)
async def capture_leave_endpoint(
    leave_data: CaptureLeaveRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Capture a leave and deduct it from the employee's balance

    Validations:
    - end_date >= start_date
    - approved_by_id is the employee's manager (or the employee, when they have none)
    - enough balance for the leave type; days are counted inclusively
    """
    return workflow_service.capture_leave(db, leave_data)
