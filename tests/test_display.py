from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

from content.models import GalleryItem, NewsItem, Product
from teams.models import Team, TeamMember
from website.display import (
    GALLERY,
    TEAM,
    DisplayRecord,
    build_records,
    format_price,
    placeholder_image,
)
from website.templatetags.site_filters import placeholder, plain, price


def test_format_price_uses_two_decimals_and_currency():
    assert format_price(12.5) == "12.50 €"
    assert format_price(Decimal("7")) == "7.00 €"
    assert format_price("3.456", "EUR") == "3.46 EUR"
    assert format_price(None) == ""


def test_price_filter():
    assert price(Decimal("12.50")) == "12.50 €"


def test_product_record():
    p = Product(id=4, name="Camisola", price=Decimal("25.00"), description="<p>Oficial</p>")

    rec = DisplayRecord.from_product(p)

    assert rec.title == "Camisola"
    assert rec.subtitle == "25.00 €"
    assert rec.image == placeholder_image(4)
    assert rec.members is None


def test_news_record_shows_creation_date():
    n = NewsItem(
        id=1, title="Vitória", content="<b>3-0</b>", image_url="/media/uploads/x.jpg",
        created_at=datetime(2026, 2, 1, 12, 0, tzinfo=dt_timezone.utc),
    )

    rec = DisplayRecord.from_news(n)

    assert rec.subtitle == "01/02/2026"
    assert rec.image == "/media/uploads/x.jpg"
    assert rec.description == "<b>3-0</b>"


def test_gallery_record_without_title():
    rec = DisplayRecord.from_gallery(GalleryItem(id=3, image_url="/media/a.jpg"))

    assert rec.kind == GALLERY
    assert rec.title == "Sem título"


def test_team_record_carries_its_roster():
    team = Team(id=1, name="Séniores A", category="Séniores Masculinos")
    members = [
        TeamMember(id=1, team_id=1, name="Rui"),
        TeamMember(id=2, team_id=2, name="Ana"),
    ]

    (rec,) = build_records(TEAM, [team], members=members)

    assert rec.subtitle == "Séniores Masculinos"
    assert [m.pk for m in rec.members] == [1]


def test_placeholder_tag_matches_record_fallback():
    assert placeholder(7, "400/250") == placeholder_image(7, "400/250")
    assert placeholder(7) == placeholder_image(7) == "https://picsum.photos/seed/7/800/600"


def test_plain_filter():
    assert plain("<p>Olá <b>mundo</b></p>") == "Olá mundo"
