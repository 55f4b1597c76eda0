from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'admin-users'

router = SimpleRouter()
router.register(r'', views.UserManagementViewSet, basename='user')

urlpatterns = [
    # User management routes (admin only)
    # GET    /api/admin/users/                      - List users
    # POST   /api/admin/users/                      - Create user
    # GET    /api/admin/users/{id}/                 - Get user
    # PUT    /api/admin/users/{id}/                 - Update user
    # PATCH  /api/admin/users/{id}/role/            - Change role
    # PATCH  /api/admin/users/{id}/reset-password/  - Reset password
    # PATCH  /api/admin/users/{id}/toggle-status/   - Activate/deactivate

    path('', include(router.urls)),
]
