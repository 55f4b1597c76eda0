from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'menu'

router = SimpleRouter()
router.register(r'categories', views.MenuCategoryViewSet, basename='category')
router.register(r'items', views.MenuItemViewSet, basename='item')

urlpatterns = [
    # GET    /api/menu/                         - Guest menu
    # GET    /api/menu/categories/              - Active categories
    # POST   /api/menu/categories/              - Create category
    # PUT    /api/menu/categories/{id}/         - Update category
    # DELETE /api/menu/categories/{id}/         - Delete category
    # GET    /api/menu/categories/{id}/items/   - Available items of a category
    # POST   /api/menu/items/                   - Create item
    # GET    /api/menu/items/{id}/              - Item detail
    # PUT    /api/menu/items/{id}/              - Update item
    # DELETE /api/menu/items/{id}/              - Delete item
    path('', views.menu, name='menu'),
    path('', include(router.urls)),
]
