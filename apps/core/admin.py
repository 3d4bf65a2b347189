"""Base admin classes for all apps."""
from django.contrib import admin


class BaseModelAdmin(admin.ModelAdmin):
    """Base admin for models with common audit fields."""
    list_display = ['id', 'created_at', 'updated_at']
    list_filter = ['created_at']
    search_fields = ['id']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']
