"""Fundraising campaigns and the donations made to them."""
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel
from apps.core.constants import DonationStatus


class Campaign(BaseModel):
    """Time-bounded fundraising effort owned by one masjid."""

    title = models.CharField(
        max_length=100,
        verbose_name=_('Title')
    )

    description = models.TextField(
        blank=True,
        verbose_name=_('Description')
    )

    goal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        verbose_name=_('Goal')
    )

    raised = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        editable=False,
        verbose_name=_('Raised'),
        help_text=_('Sum of completed donations, maintained by the ledger')
    )

    start_date = models.DateField(
        default=timezone.localdate,
        verbose_name=_('Start date')
    )

    end_date = models.DateField(
        null=True,
        blank=True,
        verbose_name=_('End date')
    )

    is_active = models.BooleanField(
        default=True,
        verbose_name=_('Active'),
        help_text=_('Inactive campaigns refuse new donations')
    )

    cover_image_url = models.URLField(
        blank=True,
        verbose_name=_('Cover image URL')
    )

    masjid = models.ForeignKey(
        'masjids.Masjid',
        on_delete=models.PROTECT,
        related_name='campaigns',
        verbose_name=_('Masjid')
    )

    class Meta:
        verbose_name = _('Campaign')
        verbose_name_plural = _('Campaigns')
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def progress_percentage(self):
        """Calculate progress towards goal."""
        if not self.goal:
            return 0
        return min(100, int((self.raised / self.goal) * 100))

    @property
    def is_ongoing(self):
        today = timezone.localdate()
        if not self.is_active:
            return False
        if self.end_date and today > self.end_date:
            return False
        return today >= self.start_date


class Donation(BaseModel):
    """A single gift to a campaign. Only status and transaction_id change after creation."""

    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        verbose_name=_('Amount')
    )

    payment_method = models.CharField(
        max_length=50,
        verbose_name=_('Payment method')
    )

    status = models.CharField(
        max_length=20,
        choices=DonationStatus.CHOICES,
        default=DonationStatus.PENDING,
        verbose_name=_('Status')
    )

    transaction_id = models.CharField(
        max_length=100,
        blank=True,
        verbose_name=_('Transaction ID')
    )

    is_anonymous = models.BooleanField(
        default=False,
        verbose_name=_('Anonymous')
    )

    message = models.CharField(
        max_length=500,
        blank=True,
        verbose_name=_('Message')
    )

    donor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='donations',
        verbose_name=_('Donor')
    )

    campaign = models.ForeignKey(
        Campaign,
        on_delete=models.PROTECT,
        related_name='donations',
        verbose_name=_('Campaign')
    )

    class Meta:
        verbose_name = _('Donation')
        verbose_name_plural = _('Donations')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['campaign', 'status'], name='donations_campaign_status_idx'),
        ]

    def __str__(self):
        return f'{self.amount} to {self.campaign} ({self.status})'

    @property
    def is_completed(self):
        return self.status == DonationStatus.COMPLETED
