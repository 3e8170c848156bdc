from typing import Any

from django.utils.html import escape


def sanitize(value: Any) -> str:
    """
    Escape HTML-significant characters (``< > & " '``) so stored values cannot
    carry markup back out to a browser. Non-string values are stringified first,
    which is how prices reach the store.
    """
    return str(escape(str(value)))
