"""Request source and response types for the WSGI/CLI boundary."""

from roost.http.query import QueryParams
from roost.http.request import Request
from roost.http.response import Response

__all__ = ["QueryParams", "Request", "Response"]
