"""Test factories for masjids app."""
import factory
from factory.django import DjangoModelFactory

from apps.core.constants import MasjidAdminRole
from apps.masjids.models import Masjid, MasjidAdmin
from apps.users.tests.factories import UserFactory


class MasjidFactory(DjangoModelFactory):
    """Creates Masjid instances for testing."""

    class Meta:
        model = Masjid

    name = factory.Sequence(lambda n: f'Masjid {n}')
    description = factory.Faker('paragraph')
    address = factory.Faker('street_address')
    city = factory.Faker('city')
    state = factory.Faker('state')
    country = 'USA'
    zip_code = factory.Faker('postcode')
    email = factory.Faker('email')


class MasjidAdminFactory(DjangoModelFactory):
    """Grants a fresh user admin rights over a fresh masjid."""

    class Meta:
        model = MasjidAdmin

    user = factory.SubFactory(UserFactory)
    masjid = factory.SubFactory(MasjidFactory)
    role = MasjidAdminRole.ADMIN
