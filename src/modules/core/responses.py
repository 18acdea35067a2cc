"""Uniform response envelope.

Every endpoint except the existence check answers with one of two
shapes::

    {"message": ..., "data": ..., "status": "success"}
    {"title": ..., "message": ..., "status": "error"}
"""

from __future__ import annotations

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def success_response(
    message: str, data: Any = None, status: int = http_status.HTTP_200_OK
) -> Response:
    return Response(
        {"message": message, "data": data, "status": STATUS_SUCCESS},
        status=status,
    )


def error_response(title: str, message: str, status: int) -> Response:
    return Response(
        {"title": title, "message": message, "status": STATUS_ERROR},
        status=status,
    )
