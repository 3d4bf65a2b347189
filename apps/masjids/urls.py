"""
Masjids URLs - REST API routing.

URL Namespace:
- API: api:v1:masjids:resource-name
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views_api


api_router = DefaultRouter()

api_router.register(
    r'masjids',
    views_api.MasjidViewSet,
    basename='masjid'
)

api_urlpatterns = [
    path('', include(api_router.urls)),
]
