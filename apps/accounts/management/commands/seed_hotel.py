"""
Management command to seed a fresh hotel database.

Usage:
    python manage.py seed_hotel [--clear]

This creates:
- The default admin account (admin / admin123) and one staff account
- Rooms on three floors
- Menu categories with their dishes and drinks
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.menu.models import MenuCategory, MenuItem
from apps.orders.models import Order
from apps.rooms.models import Room


MENU = [
    ('Breakfast', 'Served 6:00 - 10:30', [
        ('Pho Bo', 'Beef noodle soup', '85000', 20),
        ('Banh Mi Op La', 'Fried eggs with baguette and pate', '55000', 10),
        ('Continental Breakfast', 'Croissant, butter, jam and fruit', '120000', 10),
    ]),
    ('Main Dishes', '', [
        ('Com Tam', 'Broken rice with grilled pork chop', '75000', 20),
        ('Bun Cha', 'Grilled pork with rice vermicelli', '80000', 25),
        ('Club Sandwich', 'With french fries', '140000', 15),
    ]),
    ('Snacks', '', [
        ('Spring Rolls', 'Fried, with dipping sauce', '45000', 10),
        ('Fruit Platter', 'Seasonal fruit', '90000', 5),
    ]),
    ('Drinks', '', [
        ('Ca Phe Sua Da', 'Iced coffee with condensed milk', '35000', 5),
        ('Fresh Orange Juice', '', '50000', 5),
        ('Mineral Water', '500 ml', '20000', 1),
    ]),
]

FLOORS = {
    1: ['101', '102', '103', '104', '105'],
    2: ['201', '202', '203', '204', '205'],
    3: ['301', '302', '303'],
}


class Command(BaseCommand):
    help = 'Create the default admin account and sample rooms and menu'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete orders, rooms and menu before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Seeding hotel data...')

        self.create_users()
        self.create_rooms()
        self.create_menu()

        self.stdout.write(self.style.SUCCESS('Hotel data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Accounts:')
        self.stdout.write('  admin / admin123 (admin)')
        self.stdout.write('  staff / staff123 (staff)')

    def clear_data(self):
        """Orders go first; rooms and menu items are protected by them."""
        Order.objects.all().delete()
        Room.objects.all().delete()
        MenuItem.objects.all().delete()
        MenuCategory.objects.all().delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        if not User.objects.filter(username='admin').exists():
            User.objects.create_superuser(
                username='admin',
                email='admin@hotel.local',
                password='admin123',
            )

        if not User.objects.filter(username='staff').exists():
            User.objects.create_user(
                username='staff',
                email='staff@hotel.local',
                password='staff123',
                role=UserRole.STAFF,
            )

    def create_rooms(self):
        self.stdout.write('  Creating rooms...')

        for floor, numbers in FLOORS.items():
            for number in numbers:
                if not Room.objects.filter(room_number=number).exists():
                    Room.objects.create(room_number=number, floor_number=floor)

    def create_menu(self):
        self.stdout.write('  Creating menu...')

        for order, (name, description, items) in enumerate(MENU, start=1):
            category, _ = MenuCategory.objects.get_or_create(
                name=name,
                defaults={'description': description, 'display_order': order},
            )
            for item_name, item_description, price, prep_time in items:
                MenuItem.objects.get_or_create(
                    category=category,
                    name=item_name,
                    defaults={
                        'description': item_description,
                        'price': Decimal(price),
                        'preparation_time': prep_time,
                    },
                )
