"""
Donations URLs - REST API routing.

URL Namespace:
- API: api:v1:donations:resource-name
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views_api


api_router = DefaultRouter()

api_router.register(
    r'campaigns',
    views_api.CampaignViewSet,
    basename='campaign'
)

api_router.register(
    r'donations',
    views_api.DonationViewSet,
    basename='donation'
)

api_urlpatterns = [
    path('', include(api_router.urls)),
]
