"""Domain-specific exceptions for orders services."""


class OrdersServiceError(Exception):
    """Base exception for orders services."""
    pass


class InvalidOrderError(OrdersServiceError):
    """Raised when an order request is missing its room or items."""
    pass


class RoomNotFoundError(OrdersServiceError):
    """Raised when the order's room does not exist."""
    pass


class MenuItemUnavailableError(OrdersServiceError):
    """Raised when an ordered menu item does not exist or is not available."""
    pass


class OrderNotFoundError(OrdersServiceError):
    """Raised when order does not exist."""
    pass


class InvalidOrderStatusError(OrdersServiceError):
    """Raised when a status is missing or not an OrderStatus value."""
    pass
