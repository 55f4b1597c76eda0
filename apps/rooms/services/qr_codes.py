"""QR code images that lead guests from their room to the ordering page."""

from io import BytesIO
from urllib.parse import urlencode

import qrcode
from django.conf import settings

from apps.rooms.models import Room


def guest_order_url(room: Room) -> str:
    """URL the guest lands on after scanning, e.g. https://hotel/order?room=101"""
    base_url = settings.GUEST_ORDER_BASE_URL.rstrip('/')
    return f"{base_url}/order?{urlencode({'room': room.room_number})}"


def generate_room_qr_png(room: Room) -> bytes:
    """
    Render the room's guest ordering URL as a PNG QR code.

    Uses error correction level M (15% recovery).
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(guest_order_url(room))
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()
