"""Shared choices and constants used across Masjid Network apps."""
from django.utils.translation import gettext_lazy as _


class Roles:
    """Platform-wide user roles."""
    USER = 'user'
    ADMIN = 'admin'
    SUPER_ADMIN = 'super_admin'

    CHOICES = [
        (USER, _('User')),
        (ADMIN, _('Admin')),
        (SUPER_ADMIN, _('Super admin')),
    ]

    PLATFORM_ADMIN_ROLES = [ADMIN, SUPER_ADMIN]


class MasjidAdminRole:
    """Role a user holds inside a single masjid."""
    ADMIN = 'ADMIN'
    MANAGER = 'MANAGER'

    CHOICES = [
        (ADMIN, _('Admin')),
        (MANAGER, _('Manager')),
    ]


class DonationStatus:
    """Donation lifecycle states."""
    PENDING = 'PENDING'
    COMPLETED = 'COMPLETED'
    FAILED = 'FAILED'
    REFUNDED = 'REFUNDED'

    CHOICES = [
        (PENDING, _('Pending')),
        (COMPLETED, _('Completed')),
        (FAILED, _('Failed')),
        (REFUNDED, _('Refunded')),
    ]

    # Allowed forward moves; repeating the current status is handled separately.
    TRANSITIONS = {
        PENDING: {COMPLETED, FAILED},
        COMPLETED: {REFUNDED},
        FAILED: set(),
        REFUNDED: set(),
    }

    # States that own a PaymentDetail record once reached.
    SETTLED = {COMPLETED, FAILED}


class PaymentProvider:
    """Provider tags recorded on PaymentDetail."""
    STRIPE = 'STRIPE'
    DIRECT = 'DIRECT'
    MANUAL = 'MANUAL'

    CHOICES = [
        (STRIPE, 'Stripe'),
        (DIRECT, _('Direct')),
        (MANUAL, _('Manual')),
    ]


class WebhookEvent:
    """Gateway event types dispatched by the payment webhook."""
    PAYMENT_SUCCEEDED = 'payment_intent.succeeded'
    PAYMENT_FAILED = 'payment_intent.payment_failed'
