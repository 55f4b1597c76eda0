import pytest
from django.core.management import call_command
from apps.accounts.models import User, UserRole
from apps.menu.models import MenuCategory, MenuItem
from apps.orders.models import Order
from apps.rooms.models import Room


@pytest.mark.django_db
class TestSeedHotel:

    def test_seeds_accounts_rooms_and_menu(self):
        call_command('seed_hotel')

        admin = User.objects.get(username='admin')
        assert admin.role == UserRole.ADMIN
        assert admin.is_superuser
        assert admin.check_password('admin123')
        assert User.objects.get(username='staff').role == UserRole.STAFF
        assert Room.objects.count() == 13
        assert MenuCategory.objects.count() == 4
        assert MenuItem.objects.count() == 11

    def test_running_twice_adds_nothing(self):
        call_command('seed_hotel')
        call_command('seed_hotel')

        assert User.objects.filter(username='admin').count() == 1
        assert Room.objects.count() == 13
        assert MenuItem.objects.count() == 11

    def test_clear_replaces_existing_data(self, place_order, room, pho):
        place_order()

        call_command('seed_hotel', '--clear')

        assert not Order.objects.exists()
        assert not Room.objects.filter(id=room.id).exists()
        assert not MenuItem.objects.filter(id=pho.id).exists()
        assert Room.objects.count() == 13
        assert MenuItem.objects.count() == 11
