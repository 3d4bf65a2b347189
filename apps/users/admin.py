"""User profile admin configuration."""
from django.contrib import admin

from apps.core.admin import BaseModelAdmin

from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(BaseModelAdmin):
    list_display = ['user', 'role', 'phone', 'created_at']
    list_filter = ['role', 'created_at']
    search_fields = ['user__email', 'user__first_name', 'user__last_name', 'phone']
    autocomplete_fields = ['user']
