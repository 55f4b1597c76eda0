"""
User management service.

Back-office operations on employee accounts (admin only). Uniqueness of
username and email is checked up front so callers get a precise error
instead of a database IntegrityError.
"""

import logging
from typing import Optional

from django.db import transaction
from django.contrib.auth import get_user_model
from django.db.models import QuerySet

from apps.accounts.models import UserRole

from .exceptions import (
    UserNotFoundError,
    DuplicateUsernameError,
    DuplicateEmailError,
    InvalidRoleError,
    CannotDeactivateSelfError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


def _validate_role(role: str) -> None:
    if role not in UserRole.values:
        raise InvalidRoleError("Valid role (admin/staff) is required")


def _ensure_unique(*, username: Optional[str], email: Optional[str], exclude_id=None) -> None:
    users = User.objects.all()
    if exclude_id is not None:
        users = users.exclude(id=exclude_id)

    if username and users.filter(username=username).exists():
        raise DuplicateUsernameError("Username already exists")

    if email and users.filter(email__iexact=email).exists():
        raise DuplicateEmailError("Email already exists")


def _get_for_update(user_id) -> User:
    try:
        return User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


def list_users() -> QuerySet:
    """Return all accounts, newest first."""
    return User.objects.order_by('-created_at')


def get_user_by_id(*, user_id) -> User:
    """
    Get a user by ID.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


@transaction.atomic
def create_user(
    *,
    username: str,
    email: str,
    password: str,
    role: str = UserRole.STAFF,
) -> User:
    """
    Create a new employee account.

    Admins also get Django admin site access (is_staff).

    Raises:
        InvalidRoleError: If role is not admin/staff
        DuplicateUsernameError: If username is taken
        DuplicateEmailError: If email is taken
    """
    _validate_role(role)
    _ensure_unique(username=username, email=email)

    user = User.objects.create_user(
        username=username,
        email=email,
        password=password,
        role=role,
        is_staff=(role == UserRole.ADMIN),
    )

    logger.info("Created %s account %s", role, username)
    return user


@transaction.atomic
def update_user(
    *,
    user_id,
    username: Optional[str] = None,
    email: Optional[str] = None,
    role: Optional[str] = None,
    is_active: Optional[bool] = None,
) -> User:
    """
    Update account details. Fields left as None are not changed.

    Raises:
        UserNotFoundError: If user doesn't exist
        DuplicateUsernameError: If the new username belongs to another user
        DuplicateEmailError: If the new email belongs to another user
        InvalidRoleError: If role is not admin/staff
    """
    user = _get_for_update(user_id)

    if role is not None:
        _validate_role(role)
    _ensure_unique(username=username, email=email, exclude_id=user.id)

    update_fields = ['updated_at']

    if username is not None:
        user.username = username
        update_fields.append('username')

    if email is not None:
        user.email = User.objects.normalize_email(email)
        update_fields.append('email')

    if role is not None:
        user.role = role
        user.is_staff = (role == UserRole.ADMIN)
        update_fields.extend(['role', 'is_staff'])

    if is_active is not None:
        user.is_active = is_active
        update_fields.append('is_active')

    user.save(update_fields=update_fields)

    logger.info("Updated account %s (%s)", user.username, ', '.join(update_fields[1:]) or 'no changes')
    return user


@transaction.atomic
def update_user_role(*, user_id, role: str) -> User:
    """
    Change an account's role.

    Raises:
        InvalidRoleError: If role is not admin/staff
        UserNotFoundError: If user doesn't exist
    """
    _validate_role(role)
    user = _get_for_update(user_id)

    user.role = role
    user.is_staff = (role == UserRole.ADMIN)
    user.save(update_fields=['role', 'is_staff', 'updated_at'])

    logger.info("Changed role of %s to %s", user.username, role)
    return user


@transaction.atomic
def reset_user_password(*, user_id, new_password: str) -> User:
    """
    Set a new password for an account.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    user = _get_for_update(user_id)

    user.set_password(new_password)
    user.save(update_fields=['password', 'updated_at'])

    logger.info("Password reset for %s", user.username)
    return user


@transaction.atomic
def toggle_user_status(*, user_id, acting_user: User) -> User:
    """
    Flip an account between active and inactive.

    Raises:
        UserNotFoundError: If user doesn't exist
        CannotDeactivateSelfError: If an admin tries to deactivate themselves
    """
    user = _get_for_update(user_id)

    if user.id == acting_user.id and user.is_active:
        raise CannotDeactivateSelfError("You cannot deactivate your own account")

    user.is_active = not user.is_active
    user.save(update_fields=['is_active', 'updated_at'])

    logger.info(
        "%s %s account %s",
        acting_user.username,
        'activated' if user.is_active else 'deactivated',
        user.username,
    )
    return user
