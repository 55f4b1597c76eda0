"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateUsernameError,
    DuplicateEmailError,
    InvalidRoleError,
    CannotDeactivateSelfError,
)
from .user_authentication import authenticate_user
from .user_management import (
    list_users,
    get_user_by_id,
    create_user,
    update_user,
    update_user_role,
    reset_user_password,
    toggle_user_status,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'DuplicateUsernameError',
    'DuplicateEmailError',
    'InvalidRoleError',
    'CannotDeactivateSelfError',
    # Services
    'authenticate_user',
    'list_users',
    'get_user_by_id',
    'create_user',
    'update_user',
    'update_user_role',
    'reset_user_password',
    'toggle_user_status',
]
