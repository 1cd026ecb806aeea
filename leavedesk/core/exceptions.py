"""
Domain exceptions raised by the service layer.

Each exception carries the HTTP status and short title used by the
exception handlers in ``leavedesk.core.errors``; services never build
HTTP responses themselves.
"""
from fastapi import status


class LeaveDeskError(Exception):
    """Base class for all domain errors"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    title: str = "Invalid Request"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnauthorizedError(LeaveDeskError):
    """Acting user is unknown or lacks the required role"""

    status_code = status.HTTP_403_FORBIDDEN
    title = "Unauthorized"


class ResourceNotFoundError(LeaveDeskError):
    status_code = status.HTTP_404_NOT_FOUND
    title = "Not Found"


class LeaveNotApprovedByManagerError(LeaveDeskError):
    """Claimed approver differs from the employee's manager-of-record"""

    title = "Improper User Manager"


class InsufficientLeaveBalanceError(LeaveDeskError):
    title = "Insufficient Leave Balance"


class NegativeBalanceError(LeaveDeskError):
    """A leave-info write would store a negative balance"""

    title = "Invalid Balance"


class UsernameAlreadyExistsError(LeaveDeskError):
    status_code = status.HTTP_409_CONFLICT
    title = "Registration Error"


class InvalidCredentialsError(LeaveDeskError):
    status_code = status.HTTP_401_UNAUTHORIZED
    title = "Invalid username or password"


class ConcurrentUpdateError(LeaveDeskError):
    """Employee row kept changing underneath a capture until retries ran out"""

    status_code = status.HTTP_409_CONFLICT
    title = "Concurrent Update"
