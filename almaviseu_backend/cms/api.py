# cms/api.py
from rest_framework import permissions, status, viewsets
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from . import repository
from .repository import WriteError


# -----------------------
# Permissions
# -----------------------
class ReadOnlyOrAdmin(permissions.IsAdminUser):
    """
    - GET/HEAD/OPTIONS : public
    - POST/PUT/PATCH/DELETE : admin uniquement
    """
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)


def write_error_response(exc):
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


class RepositoryViewSet(viewsets.ModelViewSet):
    """
    Lecture publique ; les écritures passent par cms.repository
    (mêmes règles que la console d'administration).
    """
    table = None
    permission_classes = [ReadOnlyOrAdmin]

    def get_queryset(self):
        qs = repository.get_model(self.table).objects.all()
        ordering = repository.TABLE_ORDERING.get(self.table)
        return qs.order_by(*ordering) if ordering else qs.order_by("pk")

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            obj = repository.create(self.table, serializer.validated_data)
        except WriteError as exc:
            return write_error_response(exc)
        return Response(self.get_serializer(obj).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        try:
            obj = repository.update(self.table, instance.pk, serializer.validated_data)
        except WriteError as exc:
            return write_error_response(exc)
        return Response(self.get_serializer(obj).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        # la confirmation a déjà eu lieu côté client
        try:
            repository.delete(self.table, instance.pk, confirm=lambda: True)
        except WriteError as exc:
            return write_error_response(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)


class UploadImageView(APIView):
    """
    POST /api/uploads/ (multipart, champ "file") -> {"url": "..."}
    """
    permission_classes = [IsAdminUser]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        f = request.FILES.get("file") or request.FILES.get("image")
        if not f:
            return Response({"detail": "Ficheiro em falta (campo 'file')."}, status=400)
        try:
            url = repository.upload_image(f, request=request)
        except WriteError as exc:
            return write_error_response(exc)
        return Response({"url": url}, status=status.HTTP_201_CREATED)
