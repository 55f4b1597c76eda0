# ==========================================
# apps/menu/models.py
# ==========================================

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class MenuCategory(models.Model):
    """Section of the room service menu (Breakfast, Drinks, ...)."""

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    display_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'menu_categories'
        ordering = ['display_order', 'name']
        verbose_name_plural = 'menu categories'

    def __str__(self):
        return self.name


class MenuItem(models.Model):
    """Dish or drink a guest can order."""

    category = models.ForeignKey(MenuCategory, on_delete=models.PROTECT, related_name='items')
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    image_url = models.CharField(max_length=500, blank=True)
    is_available = models.BooleanField(default=True)
    preparation_time = models.PositiveIntegerField(default=15, help_text='Minutes')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'menu_items'
        indexes = [
            models.Index(fields=['category', 'is_available'], name='menu_items_cat_avail_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name
