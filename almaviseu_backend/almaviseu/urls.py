# almaviseu/urls.py
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.http import JsonResponse

from cms.admin_views import cms_index, cms_entity, cms_delete, cms_site_content
from cms.api import UploadImageView

from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView


def api_ping(request):
    return JsonResponse({
        "name": "ALMA Viseu API",
        "admin": "/admin/",
        "auth": {
            "token": "/api/auth/token/",
            "refresh": "/api/auth/token/refresh/",
        },
        "endpoints": [
            "/api/news/",
            "/api/matches/",
            "/api/matches/upcoming/",
            "/api/matches/results/",
            "/api/products/",
            "/api/partners/",
            "/api/teams/",
            "/api/team-members/",
            "/api/gallery/",
            "/api/organization/",
            "/api/site-content/",
            "/api/uploads/",
        ],
    })


urlpatterns = [
    # Console de contenus (HTML) dans l'admin
    path("admin/cms/", admin.site.admin_view(cms_index), name="cms_index"),
    path("admin/cms/sections/", admin.site.admin_view(cms_site_content), name="cms_site_content"),
    path("admin/cms/<str:table>/", admin.site.admin_view(cms_entity), name="cms_entity"),
    path("admin/cms/<str:table>/<int:pk>/delete/", admin.site.admin_view(cms_delete), name="cms_delete"),
    path("admin/", admin.site.urls),

    # Auth
    path("api/auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    # APIs
    path("api/ping/", api_ping, name="api_ping"),
    path("api/uploads/", UploadImageView.as_view(), name="api_upload"),
    path("api/", include("content.urls")),
    path("api/", include("matches.urls")),
    path("api/", include("teams.urls")),

    # Site public
    path("", include("website.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
