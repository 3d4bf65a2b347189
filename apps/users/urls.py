"""URL configuration for users app."""
from rest_framework.routers import DefaultRouter

from . import views_api

router = DefaultRouter()
router.register(r'users', views_api.UserViewSet, basename='user')

api_urlpatterns = router.urls
