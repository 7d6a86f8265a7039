from decimal import Decimal

import pytest
from django.urls import reverse

from content.models import GalleryItem, OrganizationMember, Product, SiteContent

pytestmark = pytest.mark.django_db


def test_home_renders_with_empty_database(client):
    response = client.get(reverse("website:home"))

    assert response.status_code == 200
    assert response.context["sections"]["hero"].title == "ALMA VISEU"
    assert response.context["next_match"] is None


def test_home_splits_calendar(client, matches):
    response = client.get(reverse("website:home"))

    assert [m.pk for m in response.context["upcoming"]] == [matches["soon"].pk, matches["later"].pk]
    assert [m.pk for m in response.context["past"]] == [matches["past"].pk, matches["older"].pk]
    assert response.context["next_match"] == matches["soon"]


def test_home_lists_news_newest_first(client, news):
    first, second = news

    response = client.get(reverse("website:home"))

    assert [n.pk for n in response.context["news"]] == [second.pk, first.pk]


def test_home_shows_prices_and_custom_sections(client):
    Product.objects.create(name="Camisola", price=Decimal("12.5"))
    SiteContent.objects.create(section="shop", title="Loja do Clube")

    response = client.get(reverse("website:home"))

    assert "12.50 €" in response.content.decode()
    assert response.context["sections"]["shop"].title == "Loja do Clube"


def test_about_page_lists_organization(client):
    OrganizationMember.objects.create(name="Maria Santos", role="Presidente")

    response = client.get(reverse("website:about"))

    assert response.status_code == 200
    assert "Maria Santos" in response.content.decode()


def test_team_detail_shows_roster(client, roster):
    team = roster["team"]

    response = client.get(reverse("website:item", args=["team", team.pk]), {"fragment": 1})

    body = response.content.decode()
    assert response.status_code == 200
    assert [m.name for m in response.context["record"].members] == ["bruno", "Rui"]
    assert "Plantel" in body
    assert "Ana" not in body


def test_gallery_detail_without_title(client):
    item = GalleryItem.objects.create(image_url="/media/uploads/1.jpg")

    response = client.get(reverse("website:item", args=["gallery", item.pk]))

    assert response.status_code == 200
    assert response.context["record"].title == "Sem título"


def test_detail_of_unknown_kind_or_record(client):
    assert client.get(reverse("website:item", args=["player", 1])).status_code == 404
    assert client.get(reverse("website:item", args=["product", 999])).status_code == 404
