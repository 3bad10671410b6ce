from django.contrib import admin
from django.utils.html import format_html
from ratings.stars import RatingRangeError
from .models import Product
from .services import format_currency


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('image_preview', 'name', 'stars_preview', 'rating_stars', 'rating_count', 'price', 'is_active', 'created_at')
    list_filter = ('is_active', 'created_at')
    search_fields = ('name',)
    ordering = ('-created_at',)
    list_per_page = 25

    fieldsets = (
        ('Product', {
            'fields': ('name', 'image', 'image_url', 'price_cents')
        }),
        ('Rating', {
            'fields': ('rating_stars', 'rating_count')
        }),
        ('Status', {
            'fields': ('is_active',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    readonly_fields = ('created_at', 'updated_at')

    def image_preview(self, obj):
        if obj.image_src:
            return format_html(
                '<img src="{}" width="50" height="50" style="border-radius: 8px; object-fit: cover;" />',
                obj.image_src
            )
        return format_html(
            '<div style="width: 50px; height: 50px; background: #f8f9fa; border-radius: 8px; display: flex; align-items: center; justify-content: center; color: #6c757d;">{}</div>',
            '📦'
        )
    image_preview.short_description = "Image"

    def stars_preview(self, obj):
        try:
            return obj.star_glyphs
        except RatingRangeError:
            return format_html('<span style="color: #dc3545;">{}</span>', 'invalid rating')
    stars_preview.short_description = "Stars"

    def price(self, obj):
        return f"${format_currency(obj.price_cents)}"
    price.short_description = "Price"
    price.admin_order_field = 'price_cents'
