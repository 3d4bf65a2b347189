"""Payment details and the simulated Stripe payment-intent flow."""
import json
import logging
import uuid
from decimal import Decimal

import stripe
from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import NotFound, ValidationError

from apps.core.constants import DonationStatus, PaymentProvider, WebhookEvent
from apps.core.exceptions import Conflict
from apps.donations.models import Donation
from apps.donations.services import CampaignService, DonationService

from .models import PaymentDetail

logger = logging.getLogger(__name__)


class PaymentService:
    """PaymentDetail CRUD plus intent creation, confirmation and webhook dispatch."""

    # ─── Payment details ─────────────────────────────────────────────────────

    @staticmethod
    def list_payment_details():
        return PaymentDetail.objects.select_related('donation')

    @staticmethod
    def get_payment_detail(payment_detail_id):
        try:
            return PaymentDetail.objects.select_related('donation').get(pk=payment_detail_id)
        except (PaymentDetail.DoesNotExist, DjangoValidationError):
            logger.error(f'Payment detail with ID: {payment_detail_id} not found')
            raise NotFound(f'Payment detail with ID: {payment_detail_id} not found')

    @staticmethod
    def get_by_donation(donation_id):
        try:
            return PaymentDetail.objects.select_related('donation').get(donation_id=donation_id)
        except (PaymentDetail.DoesNotExist, DjangoValidationError):
            logger.error(f'Payment detail for donation ID: {donation_id} not found')
            raise NotFound(f'Payment detail for donation ID: {donation_id} not found')

    @staticmethod
    def create_payment_detail(donation_id, data):
        donation = DonationService.get_donation(donation_id)
        if donation.status == DonationStatus.PENDING:
            # The lifecycle records the detail when the donation settles
            logger.error(f'Payment detail refused, donation {donation_id} is still pending')
            raise Conflict(f'Donation with ID: {donation_id} has not settled yet')
        if PaymentDetail.objects.filter(donation=donation).exists():
            logger.error(f'Payment detail already exists for donation ID: {donation_id}')
            raise Conflict(f'Payment detail already exists for donation ID: {donation_id}')

        detail = PaymentDetail.objects.create(donation=donation, **data)
        logger.info(f'Created payment detail {detail.pk} for donation {donation_id}')
        return detail

    @staticmethod
    def update_payment_detail(detail, data):
        for field, value in data.items():
            setattr(detail, field, value)
        detail.save()
        logger.info(f'Updated payment detail {detail.pk}')
        return detail

    @staticmethod
    def delete_payment_detail(detail):
        logger.info(f'Deleting payment detail {detail.pk}')
        detail.delete()

    # ─── Payment intents ─────────────────────────────────────────────────────

    @staticmethod
    def _check_intent_id(payment_intent_id):
        max_length = Donation._meta.get_field('transaction_id').max_length
        if not payment_intent_id or len(payment_intent_id) > max_length:
            logger.error(f'Rejected payment intent id of length {len(payment_intent_id or "")}')
            raise ValidationError(f'Payment intent id must be 1 to {max_length} characters')

    @staticmethod
    def create_payment_intent(campaign_id, amount, payment_method, donor=None,
                              is_anonymous=False, message=''):
        """
        Open a simulated payment intent for a campaign.

        Creates a PENDING donation and returns fabricated Stripe-shaped
        identifiers. No gateway is contacted and the ledger is untouched
        until the intent is confirmed.

        Raises:
            NotFound: unknown campaign.
            ValidationError: campaign is not accepting donations.
        """
        campaign = CampaignService.get_campaign(campaign_id)
        if not campaign.is_active:
            logger.error(f'Payment intent refused, campaign {campaign_id} is not active')
            raise ValidationError('Campaign is not active')
        if Decimal(str(amount)) <= Decimal('0.00'):
            raise ValidationError({'amount': 'Amount must be positive.'})

        donation = Donation.objects.create(
            campaign=campaign,
            amount=amount,
            payment_method=payment_method,
            donor=donor,
            is_anonymous=is_anonymous,
            message=message or '',
            status=DonationStatus.PENDING,
        )

        payment_intent_id = f'pi_{uuid.uuid4().hex}'
        client_secret = f'{payment_intent_id}_secret_{uuid.uuid4().hex}'
        logger.info(f'Created payment intent {payment_intent_id} for donation {donation.pk}')

        return {
            'client_secret': client_secret,
            'payment_intent_id': payment_intent_id,
            'donation_id': str(donation.pk),
        }

    @staticmethod
    def confirm_payment_intent(payment_intent_id, donation_id):
        """Complete the donation behind an intent; the ledger picks up its amount."""
        PaymentService._check_intent_id(payment_intent_id)
        logger.info(f'Confirming payment intent {payment_intent_id} for donation {donation_id}')
        base_url = getattr(settings, 'PAYMENT_RECEIPT_BASE_URL', '')
        return DonationService.update_donation_status(
            donation_id,
            DonationStatus.COMPLETED,
            transaction_id=payment_intent_id,
            payment_detail={
                'provider': PaymentProvider.STRIPE,
                'payment_method_id': 'pm_simulated',
                'receipt_url': f'{base_url}{payment_intent_id}',
                'metadata': {'payment_intent': payment_intent_id},
            },
        )

    @staticmethod
    def fail_payment_intent(payment_intent_id, donation_id, reason=''):
        PaymentService._check_intent_id(payment_intent_id)
        logger.warning(f'Payment intent {payment_intent_id} failed for donation {donation_id}: {reason}')
        return DonationService.update_donation_status(
            donation_id,
            DonationStatus.FAILED,
            transaction_id=payment_intent_id,
            payment_detail={
                'provider': PaymentProvider.STRIPE,
                'payment_method_id': 'pm_failed',
                'metadata': {
                    'payment_intent': payment_intent_id,
                    'status': 'failed',
                    'reason': reason,
                },
            },
        )

    # ─── Webhook ─────────────────────────────────────────────────────────────

    @staticmethod
    def verify_webhook(payload, signature):
        """
        Check the Stripe-Signature header and decode the event.

        With no STRIPE_WEBHOOK_SECRET configured the payload is trusted as
        plain JSON (development mode).
        """
        if isinstance(payload, bytes):
            try:
                payload = payload.decode('utf-8')
            except UnicodeDecodeError:
                logger.error('Stripe webhook payload is not valid UTF-8')
                raise ValidationError('Invalid webhook payload')

        secret = getattr(settings, 'STRIPE_WEBHOOK_SECRET', '')
        if secret:
            tolerance = getattr(settings, 'STRIPE_WEBHOOK_TOLERANCE', 300)
            try:
                stripe.WebhookSignature.verify_header(payload, signature, secret, tolerance)
            except stripe.SignatureVerificationError as e:
                logger.error(f'Stripe webhook signature rejected: {e}')
                raise ValidationError('Invalid webhook signature')

        try:
            event = json.loads(payload)
        except json.JSONDecodeError:
            logger.error('Stripe webhook payload is not valid JSON')
            raise ValidationError('Invalid webhook payload')

        if not isinstance(event, dict):
            raise ValidationError('Invalid webhook payload')
        return event

    @staticmethod
    def _object_at(container, key):
        value = container.get(key) or {}
        if not isinstance(value, dict):
            logger.error(f'Webhook payload field "{key}" is not an object')
            raise ValidationError('Invalid webhook payload')
        return value

    @staticmethod
    def handle_webhook(payload, signature):
        """Verify and dispatch a gateway event. Returns the event type."""
        event = PaymentService.verify_webhook(payload, signature)
        event_type = event.get('type', '')

        if event_type not in (WebhookEvent.PAYMENT_SUCCEEDED, WebhookEvent.PAYMENT_FAILED):
            logger.info(f'Unhandled webhook event type: {event_type}')
            return event_type

        data = PaymentService._object_at(event, 'data')
        data = PaymentService._object_at(data, 'object')
        metadata = PaymentService._object_at(data, 'metadata')

        payment_intent_id = data.get('id') or ''
        donation_id = metadata.get('donation_id') or ''
        if not payment_intent_id or not donation_id:
            logger.error(f'Webhook event {event_type} is missing the intent or donation id')
            raise ValidationError('Webhook event is missing payment intent or donation id')
        if not isinstance(payment_intent_id, str) or not isinstance(donation_id, str):
            logger.error(f'Webhook event {event_type} carries non-string ids')
            raise ValidationError('Invalid webhook payload')

        if event_type == WebhookEvent.PAYMENT_SUCCEEDED:
            PaymentService.confirm_payment_intent(payment_intent_id, donation_id)
        else:
            failure = data.get('last_payment_error')
            reason = failure.get('message', '') if isinstance(failure, dict) else ''
            PaymentService.fail_payment_intent(payment_intent_id, donation_id, reason=str(reason))

        return event_type
