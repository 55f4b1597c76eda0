"""Services for menu business logic."""

from .exceptions import (
    MenuServiceError,
    CategoryNotFoundError,
    InvalidCategoryError,
    CategoryHasItemsError,
    MenuItemNotFoundError,
    MenuItemInUseError,
)
from .menu_catalog import (
    get_menu,
    list_active_categories,
    list_category_items,
    get_menu_item,
    list_all_menu_items,
)
from .menu_management import (
    create_category,
    update_category,
    delete_category,
    create_menu_item,
    update_menu_item,
    delete_menu_item,
)

__all__ = [
    # Exceptions
    'MenuServiceError',
    'CategoryNotFoundError',
    'InvalidCategoryError',
    'CategoryHasItemsError',
    'MenuItemNotFoundError',
    'MenuItemInUseError',
    # Catalog
    'get_menu',
    'list_active_categories',
    'list_category_items',
    'get_menu_item',
    'list_all_menu_items',
    # Management
    'create_category',
    'update_category',
    'delete_category',
    'create_menu_item',
    'update_menu_item',
    'delete_menu_item',
]
