from rest_framework import serializers
from .models import Room, RoomStatus


# =============================================================================
# Input Serializers
# =============================================================================

class RoomCreateSerializer(serializers.Serializer):
    """Validate input for adding a room."""

    room_number = serializers.CharField(max_length=10)
    floor_number = serializers.IntegerField()
    status = serializers.ChoiceField(choices=RoomStatus.choices, required=False)


class RoomUpdateSerializer(serializers.Serializer):
    """Validate input for updating a room. All fields optional."""

    room_number = serializers.CharField(max_length=10, required=False)
    floor_number = serializers.IntegerField(required=False)
    status = serializers.ChoiceField(choices=RoomStatus.choices, required=False)


class RoomBulkStatusSerializer(serializers.Serializer):
    """
    Validate bulk status change input.

    Presence and the status value are checked by the service.
    """

    room_ids = serializers.ListField(child=serializers.IntegerField(), required=False)
    status = serializers.CharField(required=False, allow_blank=True)


# =============================================================================
# Output Serializers
# =============================================================================

class RoomSerializer(serializers.ModelSerializer):

    class Meta:
        model = Room
        fields = [
            'id',
            'room_number',
            'floor_number',
            'status',
            'qr_code',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
