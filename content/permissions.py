from django.conf import settings
from rest_framework.permissions import SAFE_METHODS, BasePermission


class ContentWritePermission(BasePermission):
    """Reads are public. Creates need a staff user unless CONTENT_OPEN_WRITES is set."""

    message = "Staff credentials are required to add content."

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        if getattr(settings, "CONTENT_OPEN_WRITES", False):
            return True
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff)
