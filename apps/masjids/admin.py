"""Admin configuration for masjids."""
from django.contrib import admin

from apps.core.admin import BaseModelAdmin

from .models import Masjid, MasjidAdmin


class MasjidAdminInline(admin.TabularInline):
    model = MasjidAdmin
    extra = 0
    fields = ['user', 'role']
    autocomplete_fields = ['user']


@admin.register(Masjid)
class MasjidModelAdmin(BaseModelAdmin):
    list_display = ['name', 'city', 'country', 'is_verified', 'created_at']
    list_filter = ['is_verified', 'country']
    search_fields = ['name', 'city', 'email']
    ordering = ['name']
    inlines = [MasjidAdminInline]
    actions = ['mark_verified']

    @admin.action(description='Mark selected masjids as verified')
    def mark_verified(self, request, queryset):
        updated = queryset.update(is_verified=True)
        self.message_user(request, f'{updated} masjid(s) verified.')


@admin.register(MasjidAdmin)
class MasjidAdminModelAdmin(BaseModelAdmin):
    list_display = ['user', 'masjid', 'role', 'created_at']
    list_filter = ['role']
    search_fields = ['user__email', 'masjid__name']
    autocomplete_fields = ['user', 'masjid']
