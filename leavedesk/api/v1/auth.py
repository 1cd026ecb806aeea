"""
Authentication endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from leavedesk.core.deps import get_db, require_roles
from leavedesk.models.user import Role, User
from leavedesk.schemas.auth import LoginRequest, MessageResponse, RegisterUserRequest, TokenResponse
from leavedesk.services import user_service

router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    register_data: RegisterUserRequest,
    db: Session = Depends(get_db)
):
    """Register a regular USER account"""
    user_service.register_user(db, register_data, Role.USER)
    return MessageResponse(message="User registered successfully")


@router.post("/register/admin", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register_admin(
    register_data: RegisterUserRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(Role.ADMIN))
):
    """Register an ADMIN account (ADMIN-only)"""
    user_service.register_user(db, register_data, Role.ADMIN)
    return MessageResponse(message="Admin user created successfully")


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return JWT token

    The token's ``sub`` claim is the username; ``role`` carries the user's role.
    """
    token, user = user_service.authenticate(db, login_data.username, login_data.password)
    return TokenResponse(access_token=token, username=user.username, role=user.role)
