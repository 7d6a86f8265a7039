# content/views.py
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from cms import repository
from cms.api import RepositoryViewSet, write_error_response
from cms.repository import WriteError
from .serializers import (
    NewsItemSerializer,
    ProductSerializer,
    PartnerSerializer,
    GalleryItemSerializer,
    OrganizationMemberSerializer,
    SiteContentSerializer,
    SiteContentUpsertSerializer,
)


class NewsItemViewSet(RepositoryViewSet):
    """/api/news/ : du plus récent au plus ancien."""
    table = "news"
    serializer_class = NewsItemSerializer


class ProductViewSet(RepositoryViewSet):
    table = "products"
    serializer_class = ProductSerializer


class PartnerViewSet(RepositoryViewSet):
    table = "partners"
    serializer_class = PartnerSerializer


class GalleryItemViewSet(RepositoryViewSet):
    table = "gallery"
    serializer_class = GalleryItemSerializer


class OrganizationMemberViewSet(RepositoryViewSet):
    table = "organization"
    serializer_class = OrganizationMemberSerializer


class SiteContentViewSet(RepositoryViewSet):
    """
    /api/site-content/             -> toutes les sections personnalisées
    /api/site-content/{section}/   -> une section (404 = valeurs par défaut)
    POST /api/site-content/upsert/ -> écrit LA ligne de la section
    """
    table = "site_content"
    serializer_class = SiteContentSerializer
    lookup_field = "section"

    @action(
        detail=False, methods=["post"], url_path="upsert",
        permission_classes=[IsAdminUser],
        parser_classes=[MultiPartParser, FormParser, JSONParser],
    )
    def upsert(self, request):
        payload = SiteContentUpsertSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        try:
            obj = repository.upsert_site_content(
                data["section"], data.get("title", ""), data.get("subtitle", ""),
                image_file=data.get("image"), request=request,
            )
        except WriteError as exc:
            return write_error_response(exc)
        return Response(SiteContentSerializer(obj).data, status=status.HTTP_200_OK)
