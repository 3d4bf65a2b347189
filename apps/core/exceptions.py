"""API exceptions and the project-wide DRF exception handler."""
import logging

from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    """The request conflicts with the current state of the resource."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The request conflicts with the current state of the resource.'
    default_code = 'conflict'


class InvalidStatusTransition(Conflict):
    """A donation was asked to move to a status its current status cannot reach."""
    default_detail = 'This donation status transition is not allowed.'
    default_code = 'invalid_status_transition'

    def __init__(self, current, requested):
        self.current = current
        self.requested = requested
        super().__init__(
            f'Cannot move a donation from {current} to {requested}.'
        )


def api_exception_handler(exc, context):
    """Wrap DRF's handler: add status/timestamp/path to the body and log the failure."""
    response = exception_handler(exc, context)
    request = context.get('request')
    method = getattr(request, 'method', '')
    path = getattr(request, 'path', '')

    if response is None:
        logger.error(f'[{method}] {path} - unhandled {exc.__class__.__name__}: {exc}', exc_info=exc)
        return None

    data = response.data
    if not isinstance(data, dict) or set(data) != {'detail'}:
        data = {'detail': data}

    response.data = {
        'status_code': response.status_code,
        'timestamp': timezone.now().isoformat(),
        'path': path,
        **data,
    }

    if response.status_code >= 500:
        logger.error(f'[{method}] {path} - {response.status_code} - {response.data["detail"]}')
    else:
        logger.warning(f'[{method}] {path} - {response.status_code} - {response.data["detail"]}')

    return response
