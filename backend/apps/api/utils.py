from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Sequence

from rest_framework import status
from rest_framework.response import Response

from apps.api.schemas import FieldErrorSerializer

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST


def error_response(
    message: str,
    http_status: int = DEFAULT_ERROR_STATUS,
    *,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Return the API's error body, ``{"error": message}``.

    Args:
        message: Human-readable explanation of the error.
        http_status: HTTP status code, 400 unless given.
        headers: Optional response headers to include alongside the payload.
    """

    if not isinstance(message, str):
        raise TypeError("error_response requires message to be a string")
    message = message.strip()
    if not message:
        raise ValueError("error_response requires a non-empty message")
    if not 400 <= int(http_status) <= 599:
        raise ValueError("error_response status must be an HTTP error status")
    if headers is not None and not isinstance(headers, Mapping):
        raise TypeError("error_response headers must be a mapping if provided")

    headers_dict = (
        {str(key): str(value) for key, value in headers.items()} if headers else None
    )
    return Response({"error": message}, status=int(http_status), headers=headers_dict)


def validation_response(errors: Iterable[Any]) -> Response:
    """400 response whose body is the list of ``{"field", "message"}`` errors."""
    data = FieldErrorSerializer(list(errors), many=True).data
    return Response(data, status=status.HTTP_400_BAD_REQUEST)


def extract_fields(request, names: Sequence[str]) -> Dict[str, Any]:
    """Pick ``names`` out of the parsed body; anything but a JSON object yields ``{}``."""
    data = getattr(request, "data", None)
    if not isinstance(data, Mapping):
        return {}
    return {name: data.get(name) for name in names if name in data}
