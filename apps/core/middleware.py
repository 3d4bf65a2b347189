"""Request/response logging middleware."""
import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Logs each request and the matching response with status, size and duration.

    5xx responses are logged at ERROR, 4xx at WARNING, everything else at INFO.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        method = request.method
        path = request.get_full_path()
        ip = request.META.get('REMOTE_ADDR', '')
        user_agent = request.META.get('HTTP_USER_AGENT', '')

        logger.info(f'[REQUEST] {method} {path} - {ip} - {user_agent}')
        start = time.monotonic()

        response = self.get_response(request)

        elapsed_ms = int((time.monotonic() - start) * 1000)
        content_length = response.get('Content-Length', 0)
        message = f'[RESPONSE] {method} {path} - {response.status_code} - {content_length} - {elapsed_ms}ms'

        if response.status_code >= 500:
            logger.error(message)
        elif response.status_code >= 400:
            logger.warning(message)
        else:
            logger.info(message)

        return response
