# common/responses.py

"""
API ERROR NORMALIZATION

Domain errors are returned as:
    {"error": {"code": "<STABLE_CODE>", "message": "<user-facing text>"}}
"""

from rest_framework.response import Response


def error_response(*, code: str, message: str, http_status: int) -> Response:
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )
