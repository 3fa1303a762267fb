"""
Error taxonomy for the interaction API and the envelope exception handler.

Services raise DRF exceptions; `envelope_exception_handler` (configured as
`REST_FRAMEWORK["EXCEPTION_HANDLER"]`) renders every failure as
`{"success": false, "message": ..., "errors": ...}` with the matching
status code.
"""
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class InvalidSection(exceptions.ValidationError):
    def __init__(self, section):
        self.section = section
        super().__init__({"section": [f"Unknown marketing plan section '{section}'."]}, code="invalid_section")


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The request conflicts with the current state of the resource."
    default_code = "conflict"


class QuestionAlreadyAnswered(ConflictError):
    default_detail = "This question has already been answered."
    default_code = "already_answered"


class QuestionNotFound(exceptions.NotFound):
    default_detail = "Question not found."
    default_code = "question_not_found"


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for key, value in detail.items():
            msg = _first_message(value)
            if key in ("detail", "non_field_errors"):
                return msg
            return f"{key}: {msg}"
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("[MARKETING] Unhandled error in %s", type(view).__name__ if view else "unknown view")
        return Response(
            {"success": False, "message": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    detail = response.data
    response.data = {
        "success": False,
        "message": _first_message(detail) or "Request failed",
        "errors": detail,
    }
    return response
