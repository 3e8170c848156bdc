import time

from django.utils.deprecation import MiddlewareMixin
from apps.common import get_logger

logger = get_logger(__name__).bind(component='api', layer='middleware')


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Logs one line per request with method, path, status and duration. Server
    errors are logged at error level, client errors at warning level.
    """

    def process_request(self, request):
        request._started_at = time.monotonic()
        return None

    def process_response(self, request, response):
        started = getattr(request, '_started_at', None)
        duration_ms = round((time.monotonic() - started) * 1000, 2) if started is not None else None
        status_code = getattr(response, 'status_code', None)
        context = {
            'method': getattr(request, 'method', None),
            'path': getattr(request, 'path', None),
            'status': status_code,
            'duration_ms': duration_ms,
        }
        if status_code is not None and status_code >= 500:
            logger.error('Request failed', **context)
        elif status_code is not None and status_code >= 400:
            logger.warning('Request rejected', **context)
        else:
            logger.info('Request handled', **context)
        return response
