"""Domain-specific exceptions for menu services."""


class MenuServiceError(Exception):
    """Base exception for menu services."""
    pass


class CategoryNotFoundError(MenuServiceError):
    """Raised when menu category does not exist."""
    pass


class InvalidCategoryError(MenuServiceError):
    """Raised when a menu item refers to a category that does not exist."""
    pass


class CategoryHasItemsError(MenuServiceError):
    """Raised when deleting a category that still has menu items."""
    pass


class MenuItemNotFoundError(MenuServiceError):
    """Raised when menu item does not exist."""
    pass


class MenuItemInUseError(MenuServiceError):
    """Raised when deleting a menu item that past orders refer to."""
    pass
