"""REST API endpoints for user profiles."""
import logging

from rest_framework import viewsets, filters, mixins
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.core.permissions import IsPlatformAdmin

from .models import UserProfile
from .serializers import UserProfileSerializer, UserAdminSerializer

logger = logging.getLogger(__name__)


class UserViewSet(mixins.ListModelMixin,
                  mixins.RetrieveModelMixin,
                  mixins.UpdateModelMixin,
                  mixins.DestroyModelMixin,
                  viewsets.GenericViewSet):
    """
    Platform-admin management of user profiles plus self-service profile access.

    - list / retrieve / update / destroy: platform admins only
    - profile: GET/PATCH /api/v1/users/users/profile/ for the caller
    """

    serializer_class = UserAdminSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['role']
    search_fields = ['user__email', 'user__first_name', 'user__last_name', 'phone']
    ordering_fields = ['created_at']
    ordering = ['-created_at']

    def get_queryset(self):
        return UserProfile.objects.select_related('user')

    def get_permissions(self):
        if self.action == 'profile':
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsPlatformAdmin()]

    def perform_destroy(self, instance):
        logger.info(f'Deleting user with ID: {instance.user_id}')
        # Cascades to the profile.
        instance.user.delete()

    @action(detail=False, methods=['get', 'patch'])
    def profile(self, request):
        """Get or update the caller's own profile."""
        profile, _ = UserProfile.objects.get_or_create(user=request.user)

        if request.method == 'GET':
            return Response(UserProfileSerializer(profile).data)

        serializer = UserProfileSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info(f'Updated profile for user ID: {request.user.pk}')
        return Response(serializer.data)
