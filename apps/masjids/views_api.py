"""
Masjids API Views - REST API endpoints for masjid profiles and administrators.

Endpoints follow the namespace: api:v1:masjids:resource-name
"""
from rest_framework import viewsets, status, filters
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.core.permissions import IsMasjidAdmin, IsPlatformAdmin, is_platform_admin

from .models import Masjid
from .serializers import (
    MasjidSerializer,
    MasjidListSerializer,
    PlatformMasjidSerializer,
    MasjidAdminSerializer,
    AddMasjidAdminSerializer,
    UpdateMasjidAdminSerializer,
)
from .services import MasjidService


class MasjidViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Masjid CRUD operations.

    Provides:
    - list: GET /api/v1/masjids/masjids/
    - retrieve: GET /api/v1/masjids/masjids/{uuid}/
    - create: POST /api/v1/masjids/masjids/ (creator becomes admin)
    - update: PATCH /api/v1/masjids/masjids/{uuid}/ (masjid admin)
    - destroy: DELETE /api/v1/masjids/masjids/{uuid}/ (platform admin)

    Custom actions:
    - admins: GET/POST /api/v1/masjids/masjids/{uuid}/admins/
    - admin_detail: GET/PATCH/DELETE /api/v1/masjids/masjids/{uuid}/admins/{admin_uuid}/
    """

    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['city', 'state', 'country', 'is_verified']
    search_fields = ['name', 'city']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_queryset(self):
        if self.action == 'list':
            return Masjid.objects.all()
        return Masjid.objects.prefetch_related('admins__user')

    def get_serializer_class(self):
        if self.action == 'list':
            return MasjidListSerializer
        if self.action in ['update', 'partial_update'] and is_platform_admin(self.request.user):
            return PlatformMasjidSerializer
        return MasjidSerializer

    def get_permissions(self):
        if self.action in ['list', 'retrieve']:
            return [AllowAny()]
        if self.action == 'create':
            return [IsAuthenticated()]
        if self.action == 'destroy':
            return [IsAuthenticated(), IsPlatformAdmin()]
        if self.action in ['update', 'partial_update']:
            return [IsMasjidAdmin()]
        if self.action in ['admins', 'admin_detail'] and self.request.method != 'GET':
            return [IsMasjidAdmin()]
        return [IsAuthenticated()]

    def perform_create(self, serializer):
        serializer.instance = MasjidService.create_masjid(serializer.validated_data, self.request.user)

    def perform_update(self, serializer):
        serializer.instance = MasjidService.update_masjid(serializer.instance, serializer.validated_data)

    def perform_destroy(self, instance):
        MasjidService.delete_masjid(instance)

    @action(detail=True, methods=['get', 'post'])
    def admins(self, request, pk=None):
        """List administrators, or assign a new one."""
        masjid = self.get_object()

        if request.method == 'GET':
            admins = MasjidService.list_admins(masjid)
            return Response(MasjidAdminSerializer(admins, many=True).data)

        serializer = AddMasjidAdminSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        admin = MasjidService.add_admin(
            masjid,
            user_id=serializer.validated_data['user_id'],
            role=serializer.validated_data['role'],
        )
        return Response(MasjidAdminSerializer(admin).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['get', 'patch', 'delete'], url_path=r'admins/(?P<admin_id>[^/.]+)')
    def admin_detail(self, request, pk=None, admin_id=None):
        """Retrieve, change the role of, or remove one administrator."""
        masjid = self.get_object()
        admin = MasjidService.get_admin(masjid, admin_id)

        if request.method == 'GET':
            return Response(MasjidAdminSerializer(admin).data)

        if request.method == 'DELETE':
            MasjidService.remove_admin(admin)
            return Response(status=status.HTTP_204_NO_CONTENT)

        serializer = UpdateMasjidAdminSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        admin = MasjidService.update_admin(admin, serializer.validated_data['role'])
        return Response(MasjidAdminSerializer(admin).data)
