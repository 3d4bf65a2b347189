"""Tests for RequestLoggingMiddleware."""
import logging

from django.http import HttpResponse
from django.test import RequestFactory

from apps.core.middleware import RequestLoggingMiddleware


def responder(status):
    def view(request):
        return HttpResponse('OK', status=status)
    return view


class TestRequestLoggingMiddleware:

    def setup_method(self):
        self.factory = RequestFactory()

    def test_success_logged_at_info(self, caplog):
        middleware = RequestLoggingMiddleware(responder(200))
        with caplog.at_level(logging.INFO, logger='apps.core.middleware'):
            response = middleware(self.factory.get('/api/v1/masjids/'))

        assert response.status_code == 200
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith('[REQUEST] GET /api/v1/masjids/') for m in messages)
        assert any(m.startswith('[RESPONSE] GET /api/v1/masjids/ - 200') for m in messages)

    def test_client_error_logged_at_warning(self, caplog):
        middleware = RequestLoggingMiddleware(responder(404))
        with caplog.at_level(logging.INFO, logger='apps.core.middleware'):
            middleware(self.factory.get('/missing/'))

        record = [r for r in caplog.records if r.getMessage().startswith('[RESPONSE]')][0]
        assert record.levelno == logging.WARNING

    def test_server_error_logged_at_error(self, caplog):
        middleware = RequestLoggingMiddleware(responder(503))
        with caplog.at_level(logging.INFO, logger='apps.core.middleware'):
            middleware(self.factory.post('/api/v1/payments/webhook/'))

        record = [r for r in caplog.records if r.getMessage().startswith('[RESPONSE]')][0]
        assert record.levelno == logging.ERROR
