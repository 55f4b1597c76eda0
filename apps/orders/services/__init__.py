"""Services for orders business logic."""

from .exceptions import (
    OrdersServiceError,
    InvalidOrderError,
    RoomNotFoundError,
    MenuItemUnavailableError,
    OrderNotFoundError,
    InvalidOrderStatusError,
)
from .order_placement import create_order, generate_order_number
from .order_status import update_order_status, bulk_update_order_status
from .order_queries import (
    get_order,
    list_orders,
    filter_orders_for_management,
    get_order_history,
)

__all__ = [
    # Exceptions
    'OrdersServiceError',
    'InvalidOrderError',
    'RoomNotFoundError',
    'MenuItemUnavailableError',
    'OrderNotFoundError',
    'InvalidOrderStatusError',
    # Placement
    'create_order',
    'generate_order_number',
    # Status workflow
    'update_order_status',
    'bulk_update_order_status',
    # Queries
    'get_order',
    'list_orders',
    'filter_orders_for_management',
    'get_order_history',
]
