# website/display.py
"""
Fiche d'affichage commune (fenêtre de détail) pour quatre sources :
actualité, produit, équipe, photo. Un constructeur par source.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from django.utils import timezone
from django.utils.dateformat import format as date_format

from teams.roster import resolve_roster

PLACEHOLDER_IMAGE = "https://picsum.photos/seed/{seed}/{size}"

NEWS = "news"
PRODUCT = "product"
TEAM = "team"
GALLERY = "gallery"

KINDS = (NEWS, PRODUCT, TEAM, GALLERY)


def placeholder_image(pk, size="800/600"):
    return PLACEHOLDER_IMAGE.format(seed=pk, size=size)


def format_price(value, currency="€"):
    """12.5 -> "12.50 €" """
    if value in (None, ""):
        return ""
    return f"{Decimal(str(value)):.2f} {currency}"


@dataclass(frozen=True)
class DisplayRecord:
    kind: str
    id: int
    image: str
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    members: Optional[List] = field(default=None)

    @classmethod
    def from_news(cls, item):
        created = timezone.localtime(item.created_at) if item.created_at else None
        return cls(
            kind=NEWS,
            id=item.pk,
            image=item.image_url or placeholder_image(item.pk),
            title=item.title,
            subtitle=date_format(created, "d/m/Y") if created else None,
            description=item.content,
        )

    @classmethod
    def from_product(cls, item, currency="€"):
        return cls(
            kind=PRODUCT,
            id=item.pk,
            image=item.image_url or placeholder_image(item.pk),
            title=item.name,
            subtitle=format_price(item.price, currency),
            description=item.description,
        )

    @classmethod
    def from_team(cls, team, members):
        # plantel filtré au moment de l'ouverture
        return cls(
            kind=TEAM,
            id=team.pk,
            image=team.image_url or placeholder_image(team.pk),
            title=team.name,
            subtitle=team.category or None,
            description=team.description,
            members=resolve_roster(team, members),
        )

    @classmethod
    def from_gallery(cls, item):
        return cls(
            kind=GALLERY,
            id=item.pk,
            image=item.image_url or placeholder_image(item.pk),
            title=item.title or "Sem título",
        )


def build_records(kind, items, members=None, currency="€"):
    if kind == NEWS:
        return [DisplayRecord.from_news(i) for i in items]
    if kind == PRODUCT:
        return [DisplayRecord.from_product(i, currency) for i in items]
    if kind == TEAM:
        return [DisplayRecord.from_team(t, members or []) for t in items]
    if kind == GALLERY:
        return [DisplayRecord.from_gallery(i) for i in items]
    raise ValueError(f"type d'élément inconnu : {kind}")
