"""Campaign and donation admin configuration."""
from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _
from rest_framework.exceptions import APIException

from apps.core.admin import BaseModelAdmin
from apps.core.constants import DonationStatus

from .models import Campaign, Donation
from .services import DonationService


@admin.register(Campaign)
class CampaignAdmin(BaseModelAdmin):
    """Raised totals are read-only here; only the ledger writes them."""

    list_display = ['title', 'masjid', 'goal', 'raised', 'is_active', 'start_date', 'end_date']
    list_filter = ['is_active', 'start_date']
    search_fields = ['title', 'masjid__name']
    readonly_fields = ['id', 'raised', 'created_at', 'updated_at']
    autocomplete_fields = ['masjid']

    fieldsets = (
        (None, {
            'fields': ('title', 'description', 'masjid', 'cover_image_url')
        }),
        (_('Funding'), {
            'fields': ('goal', 'raised', 'is_active')
        }),
        (_('Dates'), {
            'fields': ('start_date', 'end_date')
        }),
        (_('Metadata'), {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Donation)
class DonationAdmin(BaseModelAdmin):
    """Status is changed through the actions so the ledger stays in sync."""

    list_display = ['id', 'campaign', 'amount', 'status', 'payment_method', 'is_anonymous', 'created_at']
    list_filter = ['status', 'payment_method', 'is_anonymous', 'created_at']
    search_fields = ['transaction_id', 'campaign__title', 'donor__email']
    readonly_fields = [
        'id',
        'amount',
        'campaign',
        'status',
        'transaction_id',
        'created_at',
        'updated_at',
    ]
    autocomplete_fields = ['donor']
    date_hierarchy = 'created_at'
    actions = ['mark_completed', 'mark_failed', 'mark_refunded']

    def has_add_permission(self, request):
        # Donations enter through the API so the ledger sees them.
        return False

    def _transition(self, request, queryset, new_status):
        moved = 0
        for donation in queryset:
            try:
                DonationService.update_donation_status(donation.pk, new_status)
                moved += 1
            except APIException as exc:
                self.message_user(request, f'{donation.pk}: {exc.detail}', messages.WARNING)
        self.message_user(request, f'{moved} donation(s) set to {new_status}.')

    @admin.action(description=_('Mark selected donations as completed'))
    def mark_completed(self, request, queryset):
        self._transition(request, queryset, DonationStatus.COMPLETED)

    @admin.action(description=_('Mark selected donations as failed'))
    def mark_failed(self, request, queryset):
        self._transition(request, queryset, DonationStatus.FAILED)

    @admin.action(description=_('Refund selected donations'))
    def mark_refunded(self, request, queryset):
        self._transition(request, queryset, DonationStatus.REFUNDED)
