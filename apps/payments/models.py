"""Payment records attached to settled donations."""
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel
from apps.core.constants import PaymentProvider


class PaymentDetail(BaseModel):
    """Receipt of how a donation was settled. At most one per donation."""

    provider = models.CharField(
        max_length=20,
        choices=PaymentProvider.CHOICES,
        default=PaymentProvider.MANUAL,
        verbose_name=_('Provider')
    )

    payment_method_id = models.CharField(
        max_length=100,
        blank=True,
        verbose_name=_('Payment method ID')
    )

    receipt_url = models.URLField(
        max_length=500,
        blank=True,
        verbose_name=_('Receipt URL')
    )

    metadata = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_('Metadata')
    )

    donation = models.OneToOneField(
        'donations.Donation',
        on_delete=models.CASCADE,
        related_name='payment_detail',
        verbose_name=_('Donation')
    )

    class Meta:
        verbose_name = _('Payment detail')
        verbose_name_plural = _('Payment details')
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.provider} - {self.donation_id}'
