"""API views for payments."""
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import APIException
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.exceptions import InvalidStatusTransition
from apps.core.permissions import IsPlatformAdmin

from .serializers import (
    PaymentDetailSerializer,
    PaymentDetailCreateSerializer,
    CreatePaymentIntentSerializer,
    PaymentIntentSerializer,
)
from .services import PaymentService

logger = logging.getLogger(__name__)


class PaymentDetailViewSet(viewsets.ModelViewSet):
    """Payment detail administration; lookup by donation for any signed-in user."""
    serializer_class = PaymentDetailSerializer

    def get_queryset(self):
        return PaymentService.list_payment_details()

    def get_permissions(self):
        if self.action == 'by_donation':
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsPlatformAdmin()]

    def create(self, request, *args, **kwargs):
        serializer = PaymentDetailCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        donation_id = data.pop('donation_id')
        detail = PaymentService.create_payment_detail(donation_id, data)
        return Response(PaymentDetailSerializer(detail).data, status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        serializer.instance = PaymentService.update_payment_detail(
            serializer.instance, serializer.validated_data
        )

    def perform_destroy(self, instance):
        PaymentService.delete_payment_detail(instance)

    @action(detail=False, methods=['get'], url_path=r'donation/(?P<donation_id>[^/.]+)')
    def by_donation(self, request, donation_id=None):
        detail = PaymentService.get_by_donation(donation_id)
        return Response(PaymentDetailSerializer(detail).data)


class CreatePaymentIntentView(APIView):
    """Open a simulated payment intent and a pending donation."""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CreatePaymentIntentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        intent = PaymentService.create_payment_intent(
            data.pop('campaign_id'),
            donor=request.user if request.user.is_authenticated else None,
            **data,
        )
        return Response(PaymentIntentSerializer(intent).data, status=status.HTTP_201_CREATED)


class ConfirmPaymentIntentView(APIView):
    """Confirm a simulated intent, completing its donation."""
    permission_classes = [AllowAny]

    def post(self, request, payment_intent_id, donation_id):
        PaymentService.confirm_payment_intent(payment_intent_id, donation_id)
        return Response({'success': True})


@method_decorator(csrf_exempt, name='dispatch')
class StripeWebhookView(View):
    """Receives Stripe webhook events."""

    def post(self, request):
        sig_header = request.META.get('HTTP_STRIPE_SIGNATURE', '')
        if not sig_header:
            logger.error('Stripe webhook called without a Stripe-Signature header')
            return JsonResponse({'detail': 'Missing Stripe-Signature header'}, status=400)

        try:
            event_type = PaymentService.handle_webhook(request.body, sig_header)
        except InvalidStatusTransition as e:
            # Acknowledge so the gateway stops retrying an event that can never apply
            logger.warning(f'Stripe webhook event ignored: {e.detail}')
            return JsonResponse({'received': True, 'ignored': True}, status=200)
        except APIException as e:
            logger.error(f'Stripe webhook error: {e.detail}')
            return JsonResponse({'detail': str(e.detail)}, status=e.status_code)

        logger.info(f'Stripe webhook processed: {event_type}')
        return JsonResponse({'received': True}, status=200)
