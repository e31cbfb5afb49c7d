"""
URL configuration for portfolio_site project.

Content routes live at the site root (``/projects``, ``/uploads/<name>``,
``/real/admin``...), see ``content.urls``.
"""

import os

from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
)

urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("health", lambda request: JsonResponse({"status": "ok"})),
    path(
        "info",
        lambda request: JsonResponse(
            {
                "app": "portfolio-content",
                "env": os.environ.get("DJANGO_ENV", "dev"),
                "debug": os.environ.get("DEBUG", "True"),
                "version": "1.0.0",
            }
        ),
    ),
    path("auth/jwt/create", TokenObtainPairView.as_view(), name="jwt-create"),
    path("auth/jwt/refresh", TokenRefreshView.as_view(), name="jwt-refresh"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),
    path("", include("content.urls")),
]
