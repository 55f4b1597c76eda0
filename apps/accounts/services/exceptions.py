"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class DuplicateUsernameError(AccountsServiceError):
    """Raised when the username is taken by another account."""
    pass


class DuplicateEmailError(AccountsServiceError):
    """Raised when the email is taken by another account."""
    pass


class InvalidRoleError(AccountsServiceError):
    """Raised when a role other than admin/staff is requested."""
    pass


class CannotDeactivateSelfError(AccountsServiceError):
    """Raised when an admin tries to deactivate their own account."""
    pass
