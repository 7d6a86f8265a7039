# website/views.py
from django.conf import settings
from django.http import Http404
from django.shortcuts import render
from django.utils import timezone

from cms.repository import fetch_all
from matches.schedule import partition_matches
from .display import KINDS, NEWS, PRODUCT, TEAM, GALLERY, build_records
from .sections import resolve_all

NAV_ITEMS = [
    ("home", "Início"),
    ("news", "Notícias"),
    ("calendar", "Calendário"),
    ("teams", "Equipas"),
    ("photos", "Fotos"),
    ("partners", "Parceiros"),
    ("shop", "Loja"),
    ("about", "Quem Somos"),
    ("contacts", "Contactos"),
]


def _base_context(snapshot):
    return {
        "sections": resolve_all(snapshot.site_content),
        "nav_items": NAV_ITEMS,
        "site_name": settings.SITE_NAME,
        "year": timezone.localdate().year,
    }


def home(request):
    """Page unique : toutes les sections, données rechargées à chaque affichage."""
    snapshot = fetch_all()
    # recalculé à chaque rendu avec l'heure courante
    upcoming, past = partition_matches(snapshot.matches, timezone.now())
    limit = settings.CALENDAR_LIMIT

    ctx = _base_context(snapshot)
    ctx.update({
        "news": snapshot.news,
        "upcoming": upcoming[:limit],
        "past": past[:limit],
        "next_match": upcoming[0] if upcoming else None,
        "teams": snapshot.teams,
        "products": snapshot.products,
        "partners": snapshot.partners,
        "gallery": snapshot.gallery,
    })
    return render(request, "website/home.html", ctx)


def about(request):
    snapshot = fetch_all()
    ctx = _base_context(snapshot)
    ctx["organization"] = snapshot.organization
    return render(request, "website/about.html", ctx)


def item_detail(request, kind, pk):
    """Contenu de la fenêtre de détail (actualité / produit / équipe / photo)."""
    if kind not in KINDS:
        raise Http404("Tipo desconhecido")
    snapshot = fetch_all()
    source = {
        NEWS: snapshot.news,
        PRODUCT: snapshot.products,
        TEAM: snapshot.teams,
        GALLERY: snapshot.gallery,
    }[kind]
    item = next((i for i in source if i.pk == pk), None)
    if item is None:
        raise Http404("Registo não encontrado")

    record = build_records(
        kind, [item], members=snapshot.team_members, currency=settings.SITE_CURRENCY,
    )[0]

    ctx = _base_context(snapshot)
    ctx["record"] = record
    ctx["coaches"] = getattr(item, "coaches", "") if kind == TEAM else ""
    template = "website/item_fragment.html" if request.GET.get("fragment") else "website/item.html"
    return render(request, template, ctx)
