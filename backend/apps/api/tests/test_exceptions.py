from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed, ParseError, Throttled
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import global_exception_handler

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_not_found_uses_fixed_message():
    request = factory.get("/api/products/9/")
    response = global_exception_handler(Http404("No Product matches"), _context(request))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data == {"error": "Item not found"}


def test_parse_error_keeps_status_and_detail():
    request = factory.post("/api/products/", data="{", content_type="application/json")
    exc = ParseError("JSON parse error - Expecting property name")
    response = global_exception_handler(exc, _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data == {"error": "JSON parse error - Expecting property name"}


def test_method_not_allowed():
    request = factory.put("/api/products/1/")
    response = global_exception_handler(MethodNotAllowed("PUT"), _context(request))
    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.data == {"error": 'Method "PUT" not allowed.'}


def test_framework_headers_survive():
    request = factory.get("/api/products/")
    response = global_exception_handler(Throttled(wait=7), _context(request))
    assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
    assert response["Retry-After"] == "7"
    assert set(response.data) == {"error"}


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/products/")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.data == {"error": "Something went wrong"}
