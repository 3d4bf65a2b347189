"""Masjid Network URL configuration with namespaced routing."""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

from apps.users.urls import api_urlpatterns as users_api
from apps.masjids.urls import api_urlpatterns as masjids_api
from apps.donations.urls import api_urlpatterns as donations_api
from apps.payments.urls import api_urlpatterns as payments_api


api_v1_patterns = [
    path('users/', include((users_api, 'users'))),
    path('masjids/', include((masjids_api, 'masjids'))),
    path('donations/', include((donations_api, 'donations'))),
    path('payments/', include((payments_api, 'payments'))),
]


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include((api_v1_patterns, 'api'), namespace='v1')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
    path('api-auth/', include('rest_framework.urls')),
]
