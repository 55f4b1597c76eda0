from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'orders'

router = SimpleRouter()
router.register(r'', views.OrderViewSet, basename='order')

urlpatterns = [
    # Order routes
    # POST   /api/orders/                 - Place order (guest)
    # GET    /api/orders/                 - Staff order board
    # GET    /api/orders/manage/          - Paginated management view
    # PATCH  /api/orders/bulk-status/     - Bulk status change
    # GET    /api/orders/{id}/            - Track order (guest)
    # PATCH  /api/orders/{id}/status/     - Change status
    # GET    /api/orders/{id}/history/    - Status history

    path('', include(router.urls)),
]
