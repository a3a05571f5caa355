"""
Middleware for API error handling
"""

import logging
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Error handling middleware that keeps internal details out of API responses
    """

    def process_exception(self, request, exception):
        """Log unhandled exceptions and answer API callers with a generic envelope"""
        logger.error("Exception in %s: %s", request.path, exception, exc_info=True)

        if request.path.startswith('/api/'):
            error_response = {
                'code': 500,
                'msg': 'Internal server error, please try again later',
                'data': None
            }
            return JsonResponse(error_response, status=500)

        return None  # Let Django handle non-API errors normally
