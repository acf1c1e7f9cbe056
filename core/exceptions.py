import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException, PermissionDenied
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ProfileRequired(PermissionDenied):
    default_detail = "No user profile is available for this account."
    default_code = "profile_required"


class RoleRequired(PermissionDenied):
    default_detail = "Your role does not allow this action."
    default_code = "role_required"

    def __init__(self, *roles):
        detail = None
        if roles:
            detail = f"This action requires the {' or '.join(roles)} role."
        super().__init__(detail=detail)


class NotScreenOwner(PermissionDenied):
    default_detail = "Only the owner of this screen can change its bookings."
    default_code = "not_screen_owner"


class BookingConflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The screen is already booked for an overlapping time window."
    default_code = "booking_conflict"


class InvalidTransition(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "This booking can no longer change status."
    default_code = "invalid_transition"


class CreativeAlreadyAttached(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "This campaign already has a creative."
    default_code = "creative_attached"


def marketplace_exception_handler(exc, context):
    """DRF handler that also maps model validation and database failures.

    Database errors surface as a transient 503 notice; the request simply did
    not take effect and nothing is retried.
    """
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, "message_dict"):
            detail = exc.message_dict
        else:
            detail = {"non_field_errors": exc.messages}
        return Response(detail, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception(f"Database failure in {view.__class__.__name__ if view else 'unknown view'}")
        return Response(
            {
                "detail": "The operation could not be completed. Please try again.",
                "transient": True,
            },
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return None
