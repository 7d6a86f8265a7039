# content/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views as api

router = DefaultRouter()
router.register(r"news", api.NewsItemViewSet, basename="news")
router.register(r"products", api.ProductViewSet, basename="product")
router.register(r"partners", api.PartnerViewSet, basename="partner")
router.register(r"gallery", api.GalleryItemViewSet, basename="gallery")
router.register(r"organization", api.OrganizationMemberViewSet, basename="organization")
router.register(r"site-content", api.SiteContentViewSet, basename="site-content")

urlpatterns = [
    path("", include(router.urls)),
]
