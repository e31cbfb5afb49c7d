from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler


class ContentError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request."
    default_code = "content_error"


class MissingField(ContentError):
    default_detail = "All required fields must be provided."
    default_code = "missing_field"


class InvalidEnum(ContentError):
    default_detail = "Invalid value."
    default_code = "invalid_enum"


class InvalidCategory(InvalidEnum):
    default_detail = "Invalid category"
    default_code = "invalid_category"


class InvalidField(ContentError):
    default_detail = "Invalid field value."
    default_code = "invalid_field"


class MalformedSkillList(ContentError):
    default_detail = "Invalid skill format."
    default_code = "malformed_skill_list"


class UploadRejected(ContentError):
    default_detail = "Only JPEG and PNG images are allowed"
    default_code = "upload_rejected"


class UploadTooLarge(UploadRejected):
    default_detail = "File too large"
    default_code = "upload_too_large"


class StoreFailure(ContentError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Storage error."
    default_code = "store_failure"


def error_message(exc) -> str:
    detail = getattr(exc, "detail", None)
    if isinstance(detail, dict):
        # First message of the first field, e.g. a parser or serializer error
        detail = next(iter(detail.values()), "")
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return str(detail or exc)


def content_exception_handler(exc, context):
    """Render every API error as ``{"error": "<message>"}``."""
    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"error": error_message(exc)}
    return response
