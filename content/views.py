from django.conf import settings
from django.http import HttpResponseRedirect
from django.shortcuts import render
from django.urls import reverse
from django.views.generic import TemplateView
from django.views.static import serve
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from . import choices, services, uploads
from .exceptions import error_message
from .kinds import ResourceKind
from .storage import upload_storage

RESULT_TEMPLATE = "content/result.html"


class ContentView(APIView):
    """GET lists a kind as JSON; POST creates one record and answers with HTML.

    The kind is bound per route: ``ContentView.as_view(kind=kinds.PROJECTS)``.
    """

    kind: ResourceKind = None
    renderer_classes = [JSONRenderer]
    throttle_scope = "content_write"

    def get_throttles(self):
        if self.request.method == "POST":
            return [ScopedRateThrottle()]
        return []

    def get_serializer_class(self):
        return self.kind.serializer_class

    @extend_schema(parameters=[OpenApiParameter("category", str, required=False)])
    def get(self, request):
        return Response(services.list_records(self.kind, request.query_params.get("category")))

    @extend_schema(responses={(200, "text/html"): str})
    def post(self, request):
        image = None
        if self.kind.upload_field:
            image = request.FILES.get(self.kind.upload_field)
            if image is not None:
                uploads.validate_image(image)
        record = services.create_record(self.kind, request.data, image=image)
        return self._render_result(
            ok=True,
            title=getattr(record, self.kind.title_field),
            list_url=reverse(f"content:{self.kind.slug}"),
        )

    def handle_exception(self, exc):
        response = super().handle_exception(exc)
        if self.request.method != "POST":
            return response
        return self._render_result(ok=False, message=error_message(exc), status=response.status_code)

    def _render_result(self, status=200, **context):
        context.update(
            label=self.kind.display_label,
            plural=self.kind.plural,
            form_url=settings.CONTENT_ENTRY_FORM_URL,
        )
        return render(self.request, RESULT_TEMPLATE, context, status=status)


class EntryFormView(TemplateView):
    """Static HTML form with one section per kind."""

    template_name = "content/entry_form.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            project_categories=choices.ProjectCategory.choices,
            design_categories=choices.DesignCategory.choices,
            blog_categories=choices.BlogCategory.choices,
            tones=choices.Tone.choices,
            skill_category_icons=choices.SkillCategoryIcon.choices,
            highlight_icons=choices.HighlightIcon.choices,
        )
        return context


def serve_upload(request, filename):
    storage = upload_storage()
    try:
        root = storage.path("")
    except NotImplementedError:
        return HttpResponseRedirect(storage.url(filename))
    return serve(request, filename, document_root=root)
