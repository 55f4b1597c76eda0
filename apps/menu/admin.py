from django.contrib import admin
from .models import MenuCategory, MenuItem


class MenuItemInline(admin.TabularInline):
    model = MenuItem
    extra = 0
    fields = ['name', 'price', 'preparation_time', 'is_available']


@admin.register(MenuCategory)
class MenuCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'display_order', 'is_active', 'item_count', 'updated_at']
    list_filter = ['is_active']
    list_editable = ['display_order', 'is_active']
    search_fields = ['name']
    ordering = ['display_order', 'name']
    inlines = [MenuItemInline]

    def item_count(self, obj):
        return obj.items.count()
    item_count.short_description = 'Items'


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'price', 'preparation_time', 'is_available', 'updated_at']
    list_filter = ['is_available', 'category']
    list_editable = ['price', 'is_available']
    search_fields = ['name', 'description']
    list_select_related = ['category']
    ordering = ['category__display_order', 'name']

    actions = ['mark_available', 'mark_unavailable']

    @admin.action(description='Mark selected items as available')
    def mark_available(self, request, queryset):
        count = queryset.update(is_available=True)
        self.message_user(request, f'{count} item(s) are now available.')

    @admin.action(description='Mark selected items as unavailable')
    def mark_unavailable(self, request, queryset):
        count = queryset.update(is_available=False)
        self.message_user(request, f'{count} item(s) are now unavailable.')
