"""
Django admin configuration for the catalog app.

Saving or deleting content here triggers frontend revalidation through the
revalidation app's signals. Each tracked model also gets a
"Revalidate selected" action to resend its pages on demand.
"""

from django.contrib import admin, messages

from revalidation.service import get_revalidation_service
from revalidation.signals import get_tracked_models

from .models import (
    Accessory, Brand, CaseStudy, Color, Gallery, Glasses, HardwareItem,
    Locale, Product, ProductCategory, ProductType,
)


class RevalidateActionMixin:
    """Adds the revalidate admin action to a tracked model admin."""

    actions = ['revalidate_selected']

    def revalidate_selected(self, request, queryset):
        """Admin action to revalidate the frontend pages of selected entries."""
        entity_type = get_tracked_models().get(queryset.model._meta.label)
        if not entity_type:
            self.message_user(request, 'This model is not tracked for revalidation.')
            return

        service = get_revalidation_service()
        if not service.is_configured():
            self.message_user(request, 'FRONTEND_URL is not configured; nothing was sent.', level=messages.ERROR)
            return

        total = queryset.count()
        count = 0
        for obj in queryset:
            if service.revalidate_entity(entity_type, obj):
                count += 1

        level = messages.SUCCESS if count == total else messages.WARNING
        self.message_user(request, f'Sent revalidation for {count} of {total} entries.', level=level)
    revalidate_selected.short_description = "Revalidate frontend pages of selected entries"


@admin.register(Locale)
class LocaleAdmin(admin.ModelAdmin):
    list_display = ('code', 'name', 'is_default', 'created_at')
    list_filter = ('is_default',)
    search_fields = ('code', 'name')


@admin.register(Product)
class ProductAdmin(RevalidateActionMixin, admin.ModelAdmin):
    list_display = ('name', 'slug', 'locale', 'brand', 'category', 'product_type', 'updated_at')
    list_filter = ('locale', 'brand', 'category', 'product_type')
    search_fields = ('name', 'slug')
    prepopulated_fields = {'slug': ('name',)}
    filter_horizontal = ('colors', 'hardware_items')
    readonly_fields = ('created_at', 'updated_at')


@admin.register(Brand)
class BrandAdmin(RevalidateActionMixin, admin.ModelAdmin):
    list_display = ('name', 'slug', 'locale', 'updated_at')
    list_filter = ('locale',)
    search_fields = ('name', 'slug')
    prepopulated_fields = {'slug': ('name',)}


@admin.register(CaseStudy)
class CaseStudyAdmin(RevalidateActionMixin, admin.ModelAdmin):
    list_display = ('title', 'slug', 'locale', 'created_at')
    list_filter = ('locale',)
    search_fields = ('title', 'slug')
    prepopulated_fields = {'slug': ('title',)}
    date_hierarchy = 'created_at'


@admin.register(Accessory, Glasses, ProductCategory, ProductType)
class LocalizedListingAdmin(RevalidateActionMixin, admin.ModelAdmin):
    list_display = ('name', 'locale', 'updated_at')
    list_filter = ('locale',)
    search_fields = ('name',)


@admin.register(Color)
class ColorAdmin(RevalidateActionMixin, admin.ModelAdmin):
    list_display = ('name', 'hex_code', 'updated_at')
    search_fields = ('name', 'hex_code')


@admin.register(HardwareItem)
class HardwareItemAdmin(RevalidateActionMixin, admin.ModelAdmin):
    list_display = ('name', 'updated_at')
    search_fields = ('name',)


@admin.register(Gallery)
class GalleryAdmin(RevalidateActionMixin, admin.ModelAdmin):
    list_display = ('title', 'created_at')
    search_fields = ('title',)
    date_hierarchy = 'created_at'
