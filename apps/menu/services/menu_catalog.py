"""Read-only menu queries used by the guest ordering page."""

from django.db.models import Prefetch, QuerySet

from apps.menu.models import MenuCategory, MenuItem

from .exceptions import CategoryNotFoundError, MenuItemNotFoundError


def get_menu() -> QuerySet:
    """
    Active categories by display order, each with its available items
    by name in ``available_items``.
    """
    return (
        MenuCategory.objects
        .filter(is_active=True)
        .order_by('display_order', 'name')
        .prefetch_related(
            Prefetch(
                'items',
                queryset=MenuItem.objects.filter(is_available=True).order_by('name'),
                to_attr='available_items',
            )
        )
    )


def list_active_categories() -> QuerySet:
    return MenuCategory.objects.filter(is_active=True).order_by('display_order', 'name')


def list_category_items(*, category_id) -> QuerySet:
    """
    Available items of a category, by name.

    Raises:
        CategoryNotFoundError: If category doesn't exist
    """
    if not MenuCategory.objects.filter(id=category_id).exists():
        raise CategoryNotFoundError("Category not found")

    return (
        MenuItem.objects
        .filter(category_id=category_id, is_available=True)
        .select_related('category')
        .order_by('name')
    )


def get_menu_item(*, item_id) -> MenuItem:
    """
    Raises:
        MenuItemNotFoundError: If menu item doesn't exist
    """
    try:
        return MenuItem.objects.select_related('category').get(id=item_id)
    except MenuItem.DoesNotExist:
        raise MenuItemNotFoundError("Menu item not found")


def list_all_menu_items() -> QuerySet:
    """Every item including unavailable ones, grouped the way the menu is shown."""
    return (
        MenuItem.objects
        .select_related('category')
        .order_by('category__display_order', 'category__name', 'name')
    )
