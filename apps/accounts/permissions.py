"""
Role-based permission classes shared by all apps.

Hotel employees are either admins or staff. Guests are anonymous and only
reach endpoints that allow unauthenticated access.
"""
from rest_framework.permissions import BasePermission


class IsAdmin(BasePermission):
    """
    Permission: authenticated user with the admin role.

    Usage:
        @permission_classes([IsAuthenticated, IsAdmin])
        def list_users(request):
            ...
    """

    message = 'Admin access required'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsStaffOrAdmin(BasePermission):
    """
    Permission: authenticated user with the staff or admin role.
    """

    message = 'Staff or admin access required'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff_member)
