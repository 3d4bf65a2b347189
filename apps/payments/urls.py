"""URL configuration for payments app."""
from django.urls import path
from rest_framework.routers import DefaultRouter

from . import views_api

router = DefaultRouter()
router.register(r'details', views_api.PaymentDetailViewSet, basename='payment-detail')

api_urlpatterns = router.urls + [
    path('create-intent/', views_api.CreatePaymentIntentView.as_view(), name='create_intent'),
    path(
        'confirm-intent/<str:payment_intent_id>/<str:donation_id>/',
        views_api.ConfirmPaymentIntentView.as_view(),
        name='confirm_intent'
    ),
    path('webhook/', views_api.StripeWebhookView.as_view(), name='stripe_webhook'),
]
