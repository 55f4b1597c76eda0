from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'rooms'

router = SimpleRouter()
router.register(r'', views.RoomViewSet, basename='room')

urlpatterns = [
    # Room routes
    # GET    /api/rooms/                      - List rooms
    # POST   /api/rooms/                      - Add room
    # PATCH  /api/rooms/bulk-status/          - Bulk status change
    # GET    /api/rooms/number/{room_number}/ - Room by number (QR access)
    # GET    /api/rooms/{id}/                 - Room detail
    # PUT    /api/rooms/{id}/                 - Update room
    # DELETE /api/rooms/{id}/                 - Delete room
    # GET    /api/rooms/{id}/orders/          - Open orders of the room
    # GET    /api/rooms/{id}/qr_code/         - QR code PNG

    path('', include(router.urls)),
]
