import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, staff_user):
        """Successfully login with valid credentials."""
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'waiter', 'password': 'StaffPass123'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Login successful'
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['username'] == 'waiter'
        assert response.data['user']['role'] == 'staff'
        assert 'password' not in response.data['user']

    def test_login_updates_last_login(self, api_client, staff_user):
        assert staff_user.last_login is None

        api_client.post(reverse('users:login'), {'username': 'waiter', 'password': 'StaffPass123'})

        staff_user.refresh_from_db()
        assert staff_user.last_login is not None

    def test_login_wrong_password(self, api_client, staff_user):
        """Login fails with wrong password."""
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'waiter', 'password': 'WrongPass'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid credentials'

    def test_login_unknown_user(self, api_client, db):
        """Unknown user gets the same message as a wrong password."""
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'ghost', 'password': 'Whatever1'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid credentials'

    def test_login_inactive_account(self, api_client, inactive_user):
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'former', 'password': 'FormerPass123'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error'] == 'Account is deactivated'

    def test_login_missing_fields(self, api_client, db):
        response = api_client.post(reverse('users:login'), {'username': 'waiter'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_admin_registers_employee(self, admin_client):
        url = reverse('users:register')
        data = {
            'username': 'newhire',
            'email': 'newhire@hotel.example.com',
            'password': 'NewHire123',
            'role': 'staff',
        }
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert response.data['user']['username'] == 'newhire'
        assert User.objects.filter(username='newhire', role=UserRole.STAFF).exists()

    def test_staff_cannot_register(self, staff_client):
        url = reverse('users:register')
        data = {
            'username': 'sneaky',
            'email': 'sneaky@hotel.example.com',
            'password': 'Sneaky123',
            'role': 'admin',
        }
        response = staff_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not User.objects.filter(username='sneaky').exists()

    def test_anonymous_cannot_register(self, api_client, db):
        response = api_client.post(reverse('users:register'), {})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_register_duplicate_username(self, admin_client, staff_user):
        url = reverse('users:register')
        data = {
            'username': 'waiter',
            'email': 'another@hotel.example.com',
            'password': 'Another123',
            'role': 'staff',
        }
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Username already exists'

    def test_register_short_password(self, admin_client):
        url = reverse('users:register')
        data = {
            'username': 'shorty',
            'email': 'shorty@hotel.example.com',
            'password': '123',
            'role': 'staff',
        }
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, staff_client, staff_user):
        response = staff_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == staff_user.id
        assert response.data['email'] == staff_user.email

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_of_deactivated_user_rejected(self, api_client, staff_user):
        refresh = RefreshToken.for_user(staff_user)
        staff_user.is_active = False
        staff_user.save()

        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_of_deleted_user_rejected(self, api_client, staff_user):
        refresh = RefreshToken.for_user(staff_user)
        staff_user.delete()

        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestTokenRefresh:
    """Tests for POST /api/auth/token/refresh/"""

    def test_refresh_returns_new_access_token(self, api_client, staff_user):
        refresh = RefreshToken.for_user(staff_user)

        response = api_client.post(reverse('token_refresh'), {'refresh': str(refresh)})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data


# =============================================================================
# User Management Tests
# =============================================================================

@pytest.mark.django_db
class TestUserList:
    """Tests for GET/POST /api/admin/users/"""

    def test_list_users_newest_first(self, admin_client, admin_user, staff_user):
        response = admin_client.get(reverse('admin-users:user-list'))

        assert response.status_code == status.HTTP_200_OK
        usernames = [u['username'] for u in response.data]
        assert usernames == ['waiter', 'manager']
        assert set(response.data[0]) >= {
            'id', 'username', 'email', 'role', 'is_active', 'created_at', 'updated_at'
        }

    def test_staff_forbidden(self, staff_client):
        response = staff_client.get(reverse('admin-users:user-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['detail'] == 'Admin access required'

    def test_create_user(self, admin_client):
        data = {
            'username': 'chef',
            'email': 'chef@hotel.example.com',
            'password': 'ChefPass123',
            'role': 'admin',
        }
        response = admin_client.post(reverse('admin-users:user-list'), data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['role'] == 'admin'
        assert User.objects.get(username='chef').is_staff is True

    def test_create_user_duplicate_email(self, admin_client, staff_user):
        data = {
            'username': 'another',
            'email': 'waiter@hotel.example.com',
            'password': 'Another123',
            'role': 'staff',
        }
        response = admin_client.post(reverse('admin-users:user-list'), data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Email already exists'

    def test_create_user_invalid_role(self, admin_client):
        data = {
            'username': 'guest',
            'email': 'guest@hotel.example.com',
            'password': 'GuestPass123',
            'role': 'guest',
        }
        response = admin_client.post(reverse('admin-users:user-list'), data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'role' in response.data

    def test_create_user_missing_fields(self, admin_client):
        response = admin_client.post(reverse('admin-users:user-list'), {'username': 'x'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        for field in ('email', 'password', 'role'):
            assert field in response.data


@pytest.mark.django_db
class TestUserUpdate:
    """Tests for PUT /api/admin/users/{id}/"""

    def test_update_user(self, admin_client, other_staff):
        url = reverse('admin-users:user-detail', args=[other_staff.id])
        response = admin_client.put(url, {'email': 'headcook@hotel.example.com', 'is_active': False})

        assert response.status_code == status.HTTP_200_OK
        other_staff.refresh_from_db()
        assert other_staff.email == 'headcook@hotel.example.com'
        assert other_staff.is_active is False

    def test_update_keeps_own_username(self, admin_client, other_staff):
        """Uniqueness check ignores the user being updated."""
        url = reverse('admin-users:user-detail', args=[other_staff.id])
        response = admin_client.put(url, {'username': 'cook'})

        assert response.status_code == status.HTTP_200_OK

    def test_update_taken_username(self, admin_client, other_staff, staff_user):
        url = reverse('admin-users:user-detail', args=[other_staff.id])
        response = admin_client.put(url, {'username': 'waiter'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Username already exists'

    def test_update_missing_user(self, admin_client):
        url = reverse('admin-users:user-detail', args=[99999])
        response = admin_client.put(url, {'username': 'nobody'})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'User not found'


@pytest.mark.django_db
class TestUserRole:
    """Tests for PATCH /api/admin/users/{id}/role/"""

    def test_promote_to_admin(self, admin_client, other_staff):
        url = reverse('admin-users:user-role', args=[other_staff.id])
        response = admin_client.patch(url, {'role': 'admin'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'User role updated successfully'
        other_staff.refresh_from_db()
        assert other_staff.role == UserRole.ADMIN
        assert other_staff.is_staff is True

    @pytest.mark.parametrize('payload', [{}, {'role': ''}, {'role': 'owner'}])
    def test_invalid_role(self, admin_client, other_staff, payload):
        url = reverse('admin-users:user-role', args=[other_staff.id])
        response = admin_client.patch(url, payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Valid role (admin/staff) is required'

    def test_missing_user(self, admin_client):
        url = reverse('admin-users:user-role', args=[99999])
        response = admin_client.patch(url, {'role': 'staff'})

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestPasswordReset:
    """Tests for PATCH /api/admin/users/{id}/reset-password/"""

    def test_reset_password(self, admin_client, other_staff):
        url = reverse('admin-users:user-reset-password', args=[other_staff.id])
        response = admin_client.patch(url, {'new_password': 'Fresh12345'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Password reset successfully'
        other_staff.refresh_from_db()
        assert other_staff.check_password('Fresh12345')

    def test_new_password_required(self, admin_client, other_staff):
        url = reverse('admin-users:user-reset-password', args=[other_staff.id])
        response = admin_client.patch(url, {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'new_password' in response.data


@pytest.mark.django_db
class TestToggleStatus:
    """Tests for PATCH /api/admin/users/{id}/toggle-status/"""

    def test_deactivate_then_activate(self, admin_client, other_staff):
        url = reverse('admin-users:user-toggle-status', args=[other_staff.id])

        response = admin_client.patch(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'User deactivated successfully'

        response = admin_client.patch(url)
        assert response.data['message'] == 'User activated successfully'
        other_staff.refresh_from_db()
        assert other_staff.is_active is True

    def test_cannot_deactivate_self(self, admin_client, admin_user):
        url = reverse('admin-users:user-toggle-status', args=[admin_user.id])
        response = admin_client.patch(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        admin_user.refresh_from_db()
        assert admin_user.is_active is True


class TestHealthCheck:
    """Tests for GET /api/health/"""

    def test_health_check(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['status'] == 'OK'
