from decimal import Decimal

from rest_framework import serializers
from .models import MenuCategory, MenuItem


# =============================================================================
# Input Serializers
# =============================================================================

class MenuCategoryInputSerializer(serializers.Serializer):
    """Validate category input. Used with partial=True for updates."""

    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    display_order = serializers.IntegerField(required=False, allow_null=True)
    is_active = serializers.BooleanField(required=False, allow_null=True)


class MenuItemCreateSerializer(serializers.Serializer):
    category_id = serializers.IntegerField()
    name = serializers.CharField(max_length=100)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image_url = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    preparation_time = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    is_available = serializers.BooleanField(required=False, allow_null=True)


class MenuItemUpdateSerializer(serializers.Serializer):
    """Every field optional; null means keep the current value."""

    category_id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(max_length=100, required=False, allow_null=True)
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.01'),
        required=False, allow_null=True
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image_url = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    preparation_time = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    is_available = serializers.BooleanField(required=False, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================

class MenuCategorySerializer(serializers.ModelSerializer):

    class Meta:
        model = MenuCategory
        fields = [
            'id',
            'name',
            'description',
            'display_order',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class MenuItemSerializer(serializers.ModelSerializer):
    category_name = serializers.CharField(source='category.name', read_only=True)

    class Meta:
        model = MenuItem
        fields = [
            'id',
            'category',
            'category_name',
            'name',
            'description',
            'price',
            'image_url',
            'is_available',
            'preparation_time',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class MenuSectionItemSerializer(serializers.ModelSerializer):
    """Item as listed under its category on the guest menu."""

    class Meta:
        model = MenuItem
        fields = [
            'id',
            'name',
            'description',
            'price',
            'image_url',
            'is_available',
            'preparation_time',
        ]
        read_only_fields = fields


class MenuSectionSerializer(serializers.ModelSerializer):
    """Category with its available items (prefetched into available_items)."""

    items = MenuSectionItemSerializer(source='available_items', many=True, read_only=True)

    class Meta:
        model = MenuCategory
        fields = ['id', 'name', 'description', 'display_order', 'items']
        read_only_fields = fields
