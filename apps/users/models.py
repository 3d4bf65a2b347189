"""User profiles carrying the platform role of each account."""
from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel
from apps.core.constants import Roles


class UserProfile(BaseModel):
    """
    Platform profile for a Django user.

    Created automatically when a user account is saved for the first time
    (see signals.py). The role decides access to platform-wide admin
    endpoints; masjid-level rights live in MasjidAdmin.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile',
        verbose_name=_('User account')
    )

    role = models.CharField(
        max_length=20,
        choices=Roles.CHOICES,
        default=Roles.USER,
        verbose_name=_('Role')
    )

    phone = models.CharField(
        max_length=20,
        blank=True,
        verbose_name=_('Phone')
    )

    profile_image = models.URLField(
        blank=True,
        verbose_name=_('Profile image')
    )

    class Meta:
        verbose_name = _('User profile')
        verbose_name_plural = _('User profiles')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['role'], name='users_profile_role_idx'),
        ]

    def __str__(self):
        return f'{self.full_name} ({self.get_role_display()})'

    @property
    def full_name(self):
        name = f'{self.user.first_name} {self.user.last_name}'.strip()
        return name or self.user.get_username()

    @property
    def is_platform_admin(self):
        return self.role in Roles.PLATFORM_ADMIN_ROLES
