# content/serializers.py
from django.conf import settings
from rest_framework import serializers

from website.display import format_price
from .models import (
    NewsItem, Product, Partner, GalleryItem, OrganizationMember, SiteContent,
)


class NewsItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = NewsItem
        fields = ["id", "created_at", "title", "content", "image_url"]
        read_only_fields = ["created_at"]


class ProductSerializer(serializers.ModelSerializer):
    price_display = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = ["id", "name", "price", "price_display", "description", "image_url"]

    def get_price_display(self, obj):
        return format_price(obj.price, settings.SITE_CURRENCY)


class PartnerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Partner
        fields = ["id", "name", "website_url", "logo_url"]


class GalleryItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = GalleryItem
        fields = ["id", "title", "image_url"]


class OrganizationMemberSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrganizationMember
        fields = ["id", "created_at", "name", "role", "image_url"]
        read_only_fields = ["created_at"]


class SiteContentSerializer(serializers.ModelSerializer):
    class Meta:
        model = SiteContent
        fields = ["id", "section", "title", "subtitle", "image_url"]


class SiteContentUpsertSerializer(serializers.Serializer):
    section = serializers.CharField(max_length=40)
    title = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    subtitle = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    image = serializers.ImageField(required=False, allow_null=True)
