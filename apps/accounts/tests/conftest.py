import pytest
from apps.accounts.models import User, UserRole


@pytest.fixture
def other_staff(db):
    """Create a second staff member to manage."""
    return User.objects.create_user(
        username='cook',
        email='cook@hotel.example.com',
        password='CookPass123',
        role=UserRole.STAFF,
    )
