from django.contrib import admin

from apps.core.admin import BaseModelAdmin

from .models import PaymentDetail


@admin.register(PaymentDetail)
class PaymentDetailAdmin(BaseModelAdmin):
    list_display = ['donation', 'provider', 'payment_method_id', 'created_at']
    list_filter = ['provider', 'created_at']
    search_fields = ['payment_method_id', 'donation__transaction_id']
    raw_id_fields = ['donation']
