import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.menu.models import MenuCategory, MenuItem
from apps.orders.services import create_order
from apps.rooms.models import Room


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def admin_user(db):
    """Create and return a hotel admin."""
    return User.objects.create_user(
        username='manager',
        email='manager@hotel.example.com',
        password='AdminPass123',
        role=UserRole.ADMIN,
        is_staff=True,
    )


@pytest.fixture
def staff_user(db):
    """Create and return a room service staff member."""
    return User.objects.create_user(
        username='waiter',
        email='waiter@hotel.example.com',
        password='StaffPass123',
        role=UserRole.STAFF,
    )


@pytest.fixture
def inactive_user(db):
    """Create and return a deactivated staff member."""
    return User.objects.create_user(
        username='former',
        email='former@hotel.example.com',
        password='FormerPass123',
        role=UserRole.STAFF,
        is_active=False,
    )


# =============================================================================
# Authenticated clients
# =============================================================================

@pytest.fixture
def admin_client(admin_user):
    """Return an API client authenticated as admin using JWT."""
    return _client_for(admin_user)


@pytest.fixture
def staff_client(staff_user):
    """Return an API client authenticated as staff using JWT."""
    return _client_for(staff_user)


# =============================================================================
# Rooms and menu
# =============================================================================

@pytest.fixture
def room(db):
    return Room.objects.create(room_number='101', floor_number=1)


@pytest.fixture
def other_room(db):
    return Room.objects.create(room_number='205', floor_number=2)


@pytest.fixture
def category(db):
    return MenuCategory.objects.create(name='Main Dishes', display_order=2)


@pytest.fixture
def pho(category):
    return MenuItem.objects.create(
        category=category,
        name='Pho Bo',
        price=Decimal('85000'),
        preparation_time=20,
    )


@pytest.fixture
def spring_rolls(category):
    return MenuItem.objects.create(
        category=category,
        name='Spring Rolls',
        price=Decimal('45000'),
        preparation_time=10,
    )


@pytest.fixture
def sold_out_item(category):
    return MenuItem.objects.create(
        category=category,
        name='Lobster',
        price=Decimal('950000'),
        preparation_time=40,
        is_available=False,
    )


# =============================================================================
# Orders
# =============================================================================

@pytest.fixture
def place_order(room, pho):
    """Return a helper that places an order through the service layer."""

    def _place(target_room=None, lines=None, **kwargs):
        if lines is None:
            lines = [{'menu_item_id': pho.id, 'quantity': 1}]
        return create_order(room_id=(target_room or room).id, items=lines, **kwargs)

    return _place
