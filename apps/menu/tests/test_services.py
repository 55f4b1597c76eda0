"""Service layer unit tests for menu app."""

import pytest
from decimal import Decimal
from django.test import override_settings

from apps.menu.models import MenuCategory
from apps.menu.services import (
    get_menu,
    list_category_items,
    create_category,
    update_category,
    create_menu_item,
    update_menu_item,
    delete_menu_item,
)
from apps.menu.services.exceptions import (
    CategoryNotFoundError,
    InvalidCategoryError,
    MenuItemNotFoundError,
    MenuItemInUseError,
)


@pytest.mark.django_db
class TestMenuCatalog:

    def test_menu_groups_available_items(self, category, pho, sold_out_item):
        MenuCategory.objects.create(name='Closed Bar', is_active=False)

        sections = list(get_menu())

        assert sections == [category]
        assert sections[0].available_items == [pho]

    def test_category_items_of_missing_category(self, db):
        with pytest.raises(CategoryNotFoundError):
            list_category_items(category_id=9999)


@pytest.mark.django_db
class TestMenuManagement:

    def test_create_category_defaults(self, db):
        category = create_category(name='Breakfast', description=None, display_order=None)

        assert category.description == ''
        assert category.display_order == 0
        assert category.is_active is True

    def test_update_category_keeps_unset_fields(self, category):
        updated = update_category(category_id=category.id, display_order=9)

        assert updated.display_order == 9
        assert updated.name == 'Main Dishes'

    @override_settings(MENU_DEFAULT_PREPARATION_TIME=12)
    def test_item_default_preparation_time(self, category):
        item = create_menu_item(category_id=category.id, name='Che', price=Decimal('30000'))

        assert item.preparation_time == 12
        assert item.is_available is True

    def test_item_invalid_category(self, db):
        with pytest.raises(InvalidCategoryError):
            create_menu_item(category_id=9999, name='Ghost', price=Decimal('1000'))

    def test_price_change_keeps_ordered_price(self, pho, place_order):
        order = place_order()

        update_menu_item(item_id=pho.id, price=Decimal('99000'))

        line = order.items.get()
        assert line.unit_price == Decimal('85000')

    def test_update_missing_item(self, db):
        with pytest.raises(MenuItemNotFoundError):
            update_menu_item(item_id=9999, name='Nothing')

    def test_delete_ordered_item(self, pho, place_order):
        place_order()

        with pytest.raises(MenuItemInUseError):
            delete_menu_item(item_id=pho.id)

    def test_delete_returns_name(self, spring_rolls):
        assert delete_menu_item(item_id=spring_rolls.id) == 'Spring Rolls'
