"""Masjid profiles and their administrators."""
from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel
from apps.core.constants import MasjidAdminRole


class Masjid(BaseModel):
    """A mosque with a public profile and one or more administrators."""

    name = models.CharField(
        max_length=200,
        verbose_name=_('Name')
    )

    description = models.TextField(
        blank=True,
        verbose_name=_('Description')
    )

    address = models.CharField(
        max_length=255,
        verbose_name=_('Address')
    )

    city = models.CharField(
        max_length=100,
        verbose_name=_('City')
    )

    state = models.CharField(
        max_length=100,
        verbose_name=_('State')
    )

    country = models.CharField(
        max_length=100,
        verbose_name=_('Country')
    )

    zip_code = models.CharField(
        max_length=20,
        verbose_name=_('Zip code')
    )

    email = models.EmailField(
        blank=True,
        verbose_name=_('Email')
    )

    phone = models.CharField(
        max_length=20,
        blank=True,
        verbose_name=_('Phone')
    )

    website = models.URLField(
        blank=True,
        verbose_name=_('Website')
    )

    logo_url = models.URLField(
        blank=True,
        verbose_name=_('Logo URL')
    )

    cover_image_url = models.URLField(
        blank=True,
        verbose_name=_('Cover image URL')
    )

    is_verified = models.BooleanField(
        default=False,
        verbose_name=_('Verified')
    )

    class Meta:
        verbose_name = _('Masjid')
        verbose_name_plural = _('Masjids')
        ordering = ['name']

    def __str__(self):
        return f'{self.name} ({self.city})'


class MasjidAdmin(BaseModel):
    """Grants a user administrative rights over one masjid."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='masjid_admin_roles',
        verbose_name=_('User')
    )

    masjid = models.ForeignKey(
        Masjid,
        on_delete=models.CASCADE,
        related_name='admins',
        verbose_name=_('Masjid')
    )

    role = models.CharField(
        max_length=20,
        choices=MasjidAdminRole.CHOICES,
        default=MasjidAdminRole.ADMIN,
        verbose_name=_('Role')
    )

    class Meta:
        verbose_name = _('Masjid admin')
        verbose_name_plural = _('Masjid admins')
        ordering = ['created_at']
        unique_together = ['user', 'masjid']

    def __str__(self):
        return f'{self.user.get_username()} - {self.masjid.name} ({self.role})'
