from django.urls import path

from . import views
from .kinds import KINDS

app_name = "content"

urlpatterns = [
    path(kind.slug, views.ContentView.as_view(kind=kind), name=kind.slug)
    for kind in KINDS
] + [
    path("uploads/<str:filename>", views.serve_upload, name="upload"),
    path("real/admin", views.EntryFormView.as_view(), name="entry-form"),
]
