"""
User service - registration, login and the admin guard
"""
import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from leavedesk.core.exceptions import (
    InvalidCredentialsError,
    UnauthorizedError,
    UsernameAlreadyExistsError,
)
from leavedesk.core.security import create_access_token, hash_password, verify_password
from leavedesk.models.user import Role, User
from leavedesk.schemas.auth import RegisterUserRequest

logger = logging.getLogger(__name__)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def verify_admin_user(db: Session, username: Optional[str]) -> User:
    """
    Guard for admin-only operations

    Args:
        db: Database session
        username: Acting user's username

    Returns:
        The acting ADMIN user

    Raises:
        UnauthorizedError: If the user does not exist or is not ADMIN
    """
    user = get_user_by_username(db, username) if username else None
    if user is None:
        raise UnauthorizedError("User not found")
    if user.role != Role.ADMIN:
        logger.warning("Unauthorized attempt to create employee by user: %s", username)
        raise UnauthorizedError("Only admin users can create employees")
    return user


def register_user(db: Session, data: RegisterUserRequest, role: Role) -> User:
    """
    Create a login account

    Raises:
        UsernameAlreadyExistsError: If the username is taken
    """
    logger.info("Creating %s user with username: %s", role.value, data.username)
    if get_user_by_username(db, data.username) is not None:
        raise UsernameAlreadyExistsError("Username already exists")

    user = User(
        username=data.username,
        password_hash=hash_password(data.password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate(db: Session, username: str, password: str) -> Tuple[str, User]:
    """
    Check credentials and issue an access token

    Returns:
        Tuple of (JWT access token, user)

    Raises:
        InvalidCredentialsError: Unknown username or wrong password
    """
    logger.info("Authenticating user: %s", username)
    user = get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError("Invalid username or password")

    token = create_access_token({"sub": user.username, "role": user.role.value})
    return token, user


def ensure_initial_admin(db: Session, username: str, password: str) -> bool:
    """
    Create the bootstrap admin account when no ADMIN user exists yet

    Returns:
        True if an admin was created
    """
    if db.query(User).filter(User.role == Role.ADMIN).first() is not None:
        logger.info("Admin user already exists, skipping initial bootstrap")
        return False
    if get_user_by_username(db, username) is not None:
        logger.warning("Bootstrap username '%s' is taken by a non-admin user, skipping", username)
        return False

    db.add(User(username=username, password_hash=hash_password(password), role=Role.ADMIN))
    db.commit()
    logger.info("Initial admin user '%s' created", username)
    return True
