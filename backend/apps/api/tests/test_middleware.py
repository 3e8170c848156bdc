import unittest
from unittest import mock

from django.http import HttpResponse
from django.test import RequestFactory

from apps.api.middleware import RequestLoggingMiddleware


class RequestLoggingMiddlewareTests(unittest.TestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def run_request(self, status_code):
        middleware = RequestLoggingMiddleware(lambda request: HttpResponse(status=status_code))
        request = self.factory.get("/api/products/")
        return middleware(request)

    @mock.patch("apps.api.middleware.logger")
    def test_level_follows_status(self, mock_logger):
        self.run_request(200)
        self.run_request(404)
        self.run_request(500)
        mock_logger.info.assert_called_once()
        mock_logger.warning.assert_called_once()
        mock_logger.error.assert_called_once()

    @mock.patch("apps.api.middleware.logger")
    def test_logs_request_context(self, mock_logger):
        response = self.run_request(201)
        self.assertEqual(response.status_code, 201)
        _, kwargs = mock_logger.info.call_args
        self.assertEqual(kwargs["method"], "GET")
        self.assertEqual(kwargs["path"], "/api/products/")
        self.assertEqual(kwargs["status"], 201)
        self.assertIsInstance(kwargs["duration_ms"], float)
