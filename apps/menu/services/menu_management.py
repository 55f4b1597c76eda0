"""
Menu management service.

Staff maintain categories and items. Updates merge: a field passed as None
keeps its current value.
"""

import logging
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.db import transaction

from apps.menu.models import MenuCategory, MenuItem
from apps.orders.models import OrderItem

from .exceptions import (
    CategoryNotFoundError,
    InvalidCategoryError,
    CategoryHasItemsError,
    MenuItemNotFoundError,
    MenuItemInUseError,
)

logger = logging.getLogger(__name__)


def _get_category_for_item(category_id) -> MenuCategory:
    try:
        return MenuCategory.objects.get(id=category_id)
    except MenuCategory.DoesNotExist:
        raise InvalidCategoryError("Invalid category ID")


def _apply_changes(instance, changes: dict) -> list:
    """Set every non-None value and return the touched field names plus updated_at."""
    update_fields = ['updated_at']
    for field, value in changes.items():
        if value is not None:
            setattr(instance, field, value)
            update_fields.append(field)
    return update_fields


# =============================================================================
# Categories
# =============================================================================

@transaction.atomic
def create_category(
    *,
    name: str,
    description: Optional[str] = '',
    display_order: Optional[int] = 0,
    is_active: Optional[bool] = True,
) -> MenuCategory:
    category = MenuCategory.objects.create(
        name=name,
        description=description or '',
        display_order=display_order or 0,
        is_active=True if is_active is None else is_active,
    )

    logger.info("Created menu category %s", category.name)
    return category


@transaction.atomic
def update_category(
    *,
    category_id,
    name: Optional[str] = None,
    description: Optional[str] = None,
    display_order: Optional[int] = None,
    is_active: Optional[bool] = None,
) -> MenuCategory:
    """
    Raises:
        CategoryNotFoundError: If category doesn't exist
    """
    try:
        category = MenuCategory.objects.select_for_update().get(id=category_id)
    except MenuCategory.DoesNotExist:
        raise CategoryNotFoundError("Category not found")

    update_fields = _apply_changes(category, {
        'name': name,
        'description': description,
        'display_order': display_order,
        'is_active': is_active,
    })
    category.save(update_fields=update_fields)

    logger.info("Updated menu category %s", category.name)
    return category


@transaction.atomic
def delete_category(*, category_id) -> None:
    """
    Raises:
        CategoryNotFoundError: If category doesn't exist
        CategoryHasItemsError: If any menu item belongs to the category
    """
    try:
        category = MenuCategory.objects.select_for_update().get(id=category_id)
    except MenuCategory.DoesNotExist:
        raise CategoryNotFoundError("Category not found")

    if category.items.exists():
        raise CategoryHasItemsError("Cannot delete category with existing menu items")

    name = category.name
    category.delete()

    logger.info("Deleted menu category %s", name)


# =============================================================================
# Items
# =============================================================================

@transaction.atomic
def create_menu_item(
    *,
    category_id,
    name: str,
    price: Decimal,
    description: Optional[str] = '',
    image_url: Optional[str] = '',
    preparation_time: Optional[int] = None,
    is_available: Optional[bool] = True,
) -> MenuItem:
    """
    Raises:
        InvalidCategoryError: If category doesn't exist
    """
    category = _get_category_for_item(category_id)

    if preparation_time is None:
        preparation_time = settings.MENU_DEFAULT_PREPARATION_TIME

    item = MenuItem.objects.create(
        category=category,
        name=name,
        price=price,
        description=description or '',
        image_url=image_url or '',
        preparation_time=preparation_time,
        is_available=True if is_available is None else is_available,
    )

    logger.info("Created menu item %s in %s at %s", item.name, category.name, item.price)
    return item


@transaction.atomic
def update_menu_item(
    *,
    item_id,
    category_id=None,
    name: Optional[str] = None,
    price: Optional[Decimal] = None,
    description: Optional[str] = None,
    image_url: Optional[str] = None,
    preparation_time: Optional[int] = None,
    is_available: Optional[bool] = None,
) -> MenuItem:
    """
    Price changes only affect future orders; existing order lines keep
    the price they were placed at.

    Raises:
        MenuItemNotFoundError: If menu item doesn't exist
        InvalidCategoryError: If the new category doesn't exist
    """
    try:
        item = MenuItem.objects.select_for_update().get(id=item_id)
    except MenuItem.DoesNotExist:
        raise MenuItemNotFoundError("Menu item not found")

    category = _get_category_for_item(category_id) if category_id is not None else None

    update_fields = _apply_changes(item, {
        'category': category,
        'name': name,
        'price': price,
        'description': description,
        'image_url': image_url,
        'preparation_time': preparation_time,
        'is_available': is_available,
    })
    item.save(update_fields=update_fields)

    logger.info("Updated menu item %s (%s)", item.name, ', '.join(update_fields[1:]) or 'no changes')
    return item


@transaction.atomic
def delete_menu_item(*, item_id) -> str:
    """
    Delete a menu item that has never been ordered.

    Returns:
        Name of the deleted item

    Raises:
        MenuItemNotFoundError: If menu item doesn't exist
        MenuItemInUseError: If past orders contain the item
    """
    try:
        item = MenuItem.objects.select_for_update().get(id=item_id)
    except MenuItem.DoesNotExist:
        raise MenuItemNotFoundError("Menu item not found")

    if OrderItem.objects.filter(menu_item=item).exists():
        raise MenuItemInUseError(
            "Cannot delete menu item that appears in orders; mark it unavailable instead"
        )

    name = item.name
    item.delete()

    logger.info("Deleted menu item %s", name)
    return name
