from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'admin-menu'

router = SimpleRouter()
router.register(r'items', views.AdminMenuItemViewSet, basename='item')

urlpatterns = [
    # Menu item routes (admin only)
    # GET    /api/admin/menu/items/        - All items including unavailable
    # POST   /api/admin/menu/items/        - Create item
    # PUT    /api/admin/menu/items/{id}/   - Merge update
    # DELETE /api/admin/menu/items/{id}/   - Delete item

    path('', include(router.urls)),
]
