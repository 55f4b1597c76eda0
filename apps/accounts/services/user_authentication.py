"""User authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, username: str, password: str) -> User:
    """
    Authenticate an employee with username and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        username: Account username
        password: Plain-text password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(username=username)
        )
    except User.DoesNotExist:
        logger.info("Login failed for unknown username %r", username)
        raise InvalidCredentialsError("Invalid credentials")

    if not user.check_password(password):
        logger.info("Login failed for %s: wrong password", username)
        raise InvalidCredentialsError("Invalid credentials")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("User %s logged in", username)
    return user
