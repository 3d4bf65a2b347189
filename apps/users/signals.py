"""Signals for automatic user profile creation."""
from django.contrib.auth import get_user_model
from django.db.models.signals import post_save
from django.dispatch import receiver

User = get_user_model()


@receiver(post_save, sender=User)
def create_profile_for_user(sender, instance, created, **kwargs):
    """Give every new account a profile; superusers start as super admins."""
    if not created:
        return

    from apps.users.models import UserProfile
    from apps.core.constants import Roles

    UserProfile.objects.get_or_create(
        user=instance,
        defaults={'role': Roles.SUPER_ADMIN if instance.is_superuser else Roles.USER},
    )
