from django.contrib import admin
from django.utils.html import format_html
from .models import Room, RoomStatus


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ['room_number', 'floor_number', 'status_badge', 'qr_code', 'updated_at']
    list_filter = ['status', 'floor_number']
    search_fields = ['room_number', 'qr_code']
    ordering = ['room_number']
    readonly_fields = ['qr_code', 'created_at', 'updated_at']

    def status_badge(self, obj):
        colors = {
            RoomStatus.AVAILABLE: '#6B8E5E',
            RoomStatus.OCCUPIED: '#2F5D8A',
            RoomStatus.MAINTENANCE: '#B85C5C',
            RoomStatus.CLEANING: '#A47449',
        }
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            colors.get(obj.status, '#ccc'), obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'
