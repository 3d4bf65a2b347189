"""
Donations services - campaign ledger, campaign management and donation lifecycle.

The ledger is the only code allowed to change ``Campaign.raised``; every
status transition that enters COMPLETED, or leaves it through a refund,
goes through ``DonationService.update_donation_status`` which calls it.
"""
import logging
import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import DecimalField, F, Value
from django.db.models.functions import Greatest
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from apps.core.constants import DonationStatus, PaymentProvider
from apps.core.exceptions import InvalidStatusTransition
from apps.core.permissions import is_platform_admin

from .models import Campaign, Donation

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')
MONEY = DecimalField(max_digits=12, decimal_places=2)


# =============================================================================
# LEDGER
# =============================================================================

class CampaignLedger:
    """Keeps ``Campaign.raised`` equal to the sum of its completed donations."""

    @staticmethod
    def apply_raised_delta(campaign_id, delta):
        """
        Add ``delta`` to the campaign total, clamped at zero.

        The new value is computed by the database in a single UPDATE, so two
        concurrent completions on the same campaign cannot lose each other.

        Raises:
            NotFound: if the campaign does not exist.
        """
        delta = Decimal(str(delta))
        updated = Campaign.objects.filter(pk=campaign_id).update(
            raised=Greatest(
                F('raised') + Value(delta, output_field=MONEY),
                Value(ZERO, output_field=MONEY),
                output_field=MONEY,
            ),
            updated_at=timezone.now(),
        )
        if not updated:
            logger.error(f'Campaign with ID: {campaign_id} not found while applying delta {delta}')
            raise NotFound(f'Campaign with ID: {campaign_id} not found')

        campaign = Campaign.objects.get(pk=campaign_id)
        logger.info(f'Campaign {campaign_id} raised total adjusted by {delta} to {campaign.raised}')
        return campaign


# =============================================================================
# CAMPAIGNS
# =============================================================================

class CampaignService:
    """Campaign CRUD guarded by the masjid-admin check."""

    @staticmethod
    def get_campaign(campaign_id):
        try:
            return Campaign.objects.select_related('masjid').get(pk=campaign_id)
        except (Campaign.DoesNotExist, DjangoValidationError):
            logger.error(f'Campaign with ID: {campaign_id} not found')
            raise NotFound(f'Campaign with ID: {campaign_id} not found')

    @staticmethod
    def list_campaigns(active_only=False):
        queryset = Campaign.objects.select_related('masjid')
        if active_only:
            queryset = queryset.filter(is_active=True)
        return queryset

    @staticmethod
    def list_by_masjid(masjid_id):
        from apps.masjids.services import MasjidService

        masjid = MasjidService.get_masjid(masjid_id)
        return Campaign.objects.filter(masjid=masjid).select_related('masjid')

    @staticmethod
    def can_manage(user, masjid_id):
        """Platform admins and admins of the owning masjid may manage its campaigns."""
        from apps.masjids.services import MasjidService

        if is_platform_admin(user):
            return True
        return MasjidService.is_masjid_admin(getattr(user, 'pk', None), masjid_id)

    @staticmethod
    def create_campaign(data, user):
        masjid = data['masjid']
        if not CampaignService.can_manage(user, masjid.pk):
            logger.error(f'User {user.pk} is not an admin of masjid {masjid.pk}')
            raise PermissionDenied('You are not an admin of this masjid')

        campaign = Campaign.objects.create(**data)
        logger.info(f'Created campaign {campaign.pk} for masjid {masjid.pk}')
        return campaign

    @staticmethod
    def update_campaign(campaign_id, data, user):
        """Update editable fields. The owning masjid and the raised total never change here."""
        campaign = CampaignService.get_campaign(campaign_id)
        if not CampaignService.can_manage(user, campaign.masjid_id):
            logger.error(f'User {user.pk} is not an admin of masjid {campaign.masjid_id}')
            raise PermissionDenied('You are not an admin of this masjid')

        data = {k: v for k, v in data.items() if k not in ('masjid', 'raised')}
        for field, value in data.items():
            setattr(campaign, field, value)
        campaign.save(update_fields=list(data) + ['updated_at'])
        logger.info(f'Updated campaign {campaign.pk}')
        return campaign

    @staticmethod
    def delete_campaign(campaign_id, user):
        campaign = CampaignService.get_campaign(campaign_id)
        if not CampaignService.can_manage(user, campaign.masjid_id):
            raise PermissionDenied('You are not an admin of this masjid')

        if campaign.donations.exists():
            logger.error(f'Cannot delete campaign {campaign.pk} because it has donations')
            raise PermissionDenied('Cannot delete a campaign that has donations')

        campaign.delete()
        logger.info(f'Deleted campaign {campaign_id}')

    @staticmethod
    def list_donations(campaign_id):
        campaign = CampaignService.get_campaign(campaign_id)
        return campaign.donations.select_related('donor', 'campaign')


# =============================================================================
# DONATIONS
# =============================================================================

class DonationService:
    """Donation creation and the status state machine."""

    @staticmethod
    def get_donation(donation_id):
        try:
            return Donation.objects.select_related('campaign', 'donor').get(pk=donation_id)
        except (Donation.DoesNotExist, DjangoValidationError):
            logger.error(f'Donation with ID: {donation_id} not found')
            raise NotFound(f'Donation with ID: {donation_id} not found')

    @staticmethod
    def create_donation(campaign_id, amount, payment_method, donor=None,
                        is_anonymous=False, message=''):
        """
        Direct donation path: create the donation and complete it at once.

        Raises:
            NotFound: unknown campaign.
            PermissionDenied: campaign is not accepting donations.
        """
        campaign = CampaignService.get_campaign(campaign_id)
        if not campaign.is_active:
            logger.error(f'Campaign {campaign_id} is not active')
            raise PermissionDenied('This campaign is not active')
        if Decimal(str(amount)) <= ZERO:
            raise ValidationError({'amount': 'Amount must be positive.'})

        with transaction.atomic():
            donation = Donation.objects.create(
                campaign=campaign,
                amount=amount,
                payment_method=payment_method,
                donor=donor,
                is_anonymous=is_anonymous,
                message=message or '',
            )
            logger.info(f'Created donation {donation.pk} of {amount} for campaign {campaign_id}')

            donation = DonationService.update_donation_status(
                donation.pk,
                DonationStatus.COMPLETED,
                transaction_id=f'txn_{uuid.uuid4().hex}',
                payment_detail={
                    'provider': PaymentProvider.DIRECT,
                    'metadata': {'payment_method': payment_method},
                },
            )
        return donation

    @staticmethod
    def update_donation_status(donation_id, new_status, transaction_id=None, payment_detail=None):
        """
        Move a donation to ``new_status`` and apply the ledger effect.

        PENDING -> COMPLETED adds the amount to the campaign, COMPLETED ->
        REFUNDED subtracts it, PENDING -> FAILED touches nothing. Asking for
        the current status again is a no-op apart from storing a new
        transaction id. Reaching COMPLETED or FAILED records a PaymentDetail
        built from ``payment_detail`` (provider MANUAL when omitted).

        Raises:
            ValidationError: unknown status value.
            NotFound: unknown donation.
            InvalidStatusTransition: the move is not allowed.
        """
        from apps.payments.models import PaymentDetail

        if new_status not in DonationStatus.TRANSITIONS:
            raise ValidationError({'status': f'"{new_status}" is not a valid donation status.'})

        with transaction.atomic():
            try:
                donation = Donation.objects.select_for_update().get(pk=donation_id)
            except (Donation.DoesNotExist, DjangoValidationError):
                logger.error(f'Donation with ID: {donation_id} not found')
                raise NotFound(f'Donation with ID: {donation_id} not found')

            current = donation.status
            if new_status == current:
                if transaction_id and transaction_id != donation.transaction_id:
                    donation.transaction_id = transaction_id
                    donation.save(update_fields=['transaction_id', 'updated_at'])
                logger.info(f'Donation {donation.pk} already {current}, nothing to apply')
                return donation

            if new_status not in DonationStatus.TRANSITIONS[current]:
                logger.warning(f'Rejected donation {donation.pk} transition {current} -> {new_status}')
                raise InvalidStatusTransition(current, new_status)

            donation.status = new_status
            if transaction_id:
                donation.transaction_id = transaction_id
            donation.save(update_fields=['status', 'transaction_id', 'updated_at'])
            logger.info(f'Donation {donation.pk} moved {current} -> {new_status}')

            if new_status == DonationStatus.COMPLETED:
                CampaignLedger.apply_raised_delta(donation.campaign_id, donation.amount)
            elif current == DonationStatus.COMPLETED and new_status == DonationStatus.REFUNDED:
                CampaignLedger.apply_raised_delta(donation.campaign_id, -donation.amount)

            if new_status in DonationStatus.SETTLED:
                defaults = {'provider': PaymentProvider.MANUAL}
                defaults.update(payment_detail or {})
                PaymentDetail.objects.get_or_create(donation=donation, defaults=defaults)

        return donation

    @staticmethod
    def refund_donation(donation_id):
        return DonationService.update_donation_status(donation_id, DonationStatus.REFUNDED)
