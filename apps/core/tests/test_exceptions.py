"""Tests for the API exception handler."""
from unittest.mock import Mock

from rest_framework.exceptions import NotFound, ValidationError

from apps.core.exceptions import Conflict, InvalidStatusTransition, api_exception_handler


def make_context(path='/api/v1/test/'):
    request = Mock()
    request.method = 'GET'
    request.path = path
    return {'request': request, 'view': Mock()}


class TestApiExceptionHandler:

    def test_detail_is_kept_and_metadata_added(self):
        response = api_exception_handler(NotFound('Campaign missing'), make_context())
        assert response.status_code == 404
        assert response.data['detail'] == 'Campaign missing'
        assert response.data['status_code'] == 404
        assert response.data['path'] == '/api/v1/test/'
        assert 'timestamp' in response.data

    def test_field_errors_are_nested_under_detail(self):
        response = api_exception_handler(ValidationError({'amount': ['Too small']}), make_context())
        assert response.status_code == 400
        assert response.data['detail']['amount'] == ['Too small']

    def test_conflict_is_409(self):
        response = api_exception_handler(Conflict('Already there'), make_context())
        assert response.status_code == 409

    def test_unhandled_exception_returns_none(self):
        assert api_exception_handler(RuntimeError('boom'), make_context()) is None


class TestInvalidStatusTransition:

    def test_message_names_both_states(self):
        exc = InvalidStatusTransition('FAILED', 'COMPLETED')
        assert exc.status_code == 409
        assert 'FAILED' in str(exc.detail)
        assert 'COMPLETED' in str(exc.detail)
