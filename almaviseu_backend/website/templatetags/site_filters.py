# website/templatetags/site_filters.py
from django import template
from django.conf import settings
from django.utils.html import strip_tags

from website.display import format_price, placeholder_image

register = template.Library()


@register.filter
def price(value):
    """12.5 -> '12.50 €'"""
    return format_price(value, getattr(settings, "SITE_CURRENCY", "€"))


@register.filter
def plain(html):
    """Texte brut d'un contenu riche (aperçus des cartes)."""
    return strip_tags(html or "").strip()


@register.simple_tag
def placeholder(pk, size="800/600"):
    return placeholder_image(pk, size)
