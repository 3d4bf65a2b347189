"""Test factories for payments app."""
import factory
from factory.django import DjangoModelFactory

from apps.core.constants import PaymentProvider
from apps.donations.tests.factories import CompletedDonationFactory
from apps.payments.models import PaymentDetail


class PaymentDetailFactory(DjangoModelFactory):
    """Creates PaymentDetail instances for testing."""

    class Meta:
        model = PaymentDetail

    donation = factory.SubFactory(CompletedDonationFactory)
    provider = PaymentProvider.STRIPE
    payment_method_id = 'pm_test'
    receipt_url = factory.Sequence(lambda n: f'https://dashboard.stripe.com/payments/pi_{n}')
    metadata = factory.LazyFunction(dict)
