# ==========================================
# apps/rooms/models.py
# ==========================================

import time

from django.db import models


class RoomStatus(models.TextChoices):
    AVAILABLE = 'available', 'Available'
    OCCUPIED = 'occupied', 'Occupied'
    MAINTENANCE = 'maintenance', 'Maintenance'
    CLEANING = 'cleaning', 'Cleaning'


def generate_access_code(room_number):
    """Access code printed in the room: ROOM_<number>_<epoch-ms>."""
    return f'ROOM_{room_number}_{int(time.time() * 1000)}'


class Room(models.Model):
    """Hotel room that guests order from."""

    room_number = models.CharField(max_length=10, unique=True)
    floor_number = models.IntegerField()
    status = models.CharField(
        max_length=20,
        choices=RoomStatus.choices,
        default=RoomStatus.AVAILABLE
    )
    qr_code = models.CharField(max_length=100, unique=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rooms'
        indexes = [
            models.Index(fields=['status'], name='rooms_status_idx'),
            models.Index(fields=['floor_number'], name='rooms_floor_idx'),
        ]
        ordering = ['room_number']

    def __str__(self):
        return f'Room {self.room_number}'

    def save(self, *args, **kwargs):
        if not self.qr_code:
            self.qr_code = generate_access_code(self.room_number)
        super().save(*args, **kwargs)
