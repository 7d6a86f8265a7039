# cms/templatetags/cms_filters.py
from django import template
from django.utils.html import strip_tags
from django.utils.text import Truncator

register = template.Library()


@register.filter
def get_item(mapping, key):
    """dict[key] depuis un template (None si absent)."""
    try:
        return mapping.get(key)
    except AttributeError:
        return None


@register.filter
def cell(value, kind):
    """Valeur d'une cellule du tableau admin, sans HTML et tronquée."""
    if value in (None, ""):
        return "—"
    if kind == "richtext":
        value = strip_tags(str(value))
    return Truncator(str(value)).chars(60)
