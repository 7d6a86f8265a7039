import re
from datetime import timedelta
from decimal import Decimal
from unittest import mock

import pytest
from django.db import DatabaseError
from django.utils import timezone

from cms import repository
from cms.repository import SiteStore, WriteError
from content.models import NewsItem, Product, SiteContent
from matches.models import Match
from teams.models import Team, TeamMember

pytestmark = pytest.mark.django_db


def test_create_ignores_client_supplied_id_and_created_at():
    past = timezone.now() - timedelta(days=365)

    obj = repository.create("news", {
        "id": 999, "created_at": past, "title": "Torneio", "content": "<p>x</p>",
    })

    assert obj.pk != 999
    assert obj.created_at > past
    assert NewsItem.objects.get(pk=obj.pk).title == "Torneio"


def test_created_record_is_in_next_fetch():
    obj = repository.create("products", {"name": "Cachecol", "price": Decimal("12.50")})

    snapshot = repository.fetch_all()

    assert [p.pk for p in snapshot.products] == [obj.pk]
    assert snapshot.products[0].price == Decimal("12.50")


def test_create_with_invalid_data_raises_and_writes_nothing():
    with pytest.raises(WriteError):
        repository.create("products", {"name": "Sem preço"})

    assert not Product.objects.exists()


def test_create_with_unknown_field_is_rejected():
    with pytest.raises(WriteError, match="bogus"):
        repository.create("partners", {"name": "X", "bogus": 1})


def test_match_needs_both_scores_or_none():
    with pytest.raises(WriteError):
        repository.create("matches", {
            "date": timezone.now(), "home_team": "ALMA", "guest_team": "B", "score_home": 3,
        })

    assert not Match.objects.exists()


def test_update_changes_fields():
    product = Product.objects.create(name="Bola", price=Decimal("30"))

    repository.update("products", product.pk, {"price": Decimal("27.90"), "id": 12345})

    product.refresh_from_db()
    assert product.price == Decimal("27.90")
    assert Product.objects.count() == 1


def test_update_unknown_record():
    with pytest.raises(WriteError):
        repository.update("products", 4242, {"name": "x"})


def test_unknown_table():
    with pytest.raises(WriteError):
        repository.create("users", {"name": "x"})


def test_delete_declined_makes_no_backend_call():
    product = Product.objects.create(name="Bola", price=Decimal("30"))

    with mock.patch.object(repository, "get_model") as get_model:
        assert repository.delete("products", product.pk, confirm=lambda: False) is False
        get_model.assert_not_called()

    assert Product.objects.filter(pk=product.pk).exists()


def test_delete_confirmed():
    product = Product.objects.create(name="Bola", price=Decimal("30"))

    assert repository.delete("products", product.pk, confirm=lambda: True) is True
    assert not Product.objects.exists()


def test_team_with_members_cannot_be_deleted(roster):
    team = roster["team"]

    with pytest.raises(WriteError):
        repository.delete("teams", team.pk, confirm=lambda: True)

    assert Team.objects.filter(pk=team.pk).exists()
    assert TeamMember.objects.filter(team=team).count() == 2


def test_fetch_all_orders_news_newest_first(news):
    first, second = news

    snapshot = repository.fetch_all()

    assert [n.pk for n in snapshot.news] == [second.pk, first.pk]


def test_fetch_all_orders_matches_by_date(matches):
    snapshot = repository.fetch_all()

    dates = [m.date for m in snapshot.matches]
    assert dates == sorted(dates)


def test_fetch_all_sorts_members_by_name(roster):
    snapshot = repository.fetch_all()

    assert [m.name for m in snapshot.team_members] == ["Ana", "bruno", "Rui"]


def test_read_failure_leaves_collections_empty(caplog):
    Product.objects.create(name="Bola", price=Decimal("30"))

    with mock.patch("django.db.models.query.QuerySet._fetch_all", side_effect=DatabaseError("offline")):
        snapshot = repository.fetch_all()

    assert snapshot.products == []
    assert snapshot.site_content == {}
    assert "offline" in caplog.text


def test_upsert_site_content_keeps_one_row_per_section():
    repository.upsert_site_content("hero", "Primeiro", "a")
    repository.upsert_site_content("hero", "Segundo", "b")

    rows = SiteContent.objects.filter(section="hero")
    assert rows.count() == 1
    assert rows.get().title == "Segundo"


def test_upsert_site_content_keeps_previous_image(make_gif):
    first = repository.upsert_site_content("shop", "Loja", "", image_file=make_gif())
    assert first.image_url

    second = repository.upsert_site_content("shop", "Loja Oficial", "")

    assert second.image_url == first.image_url


def test_upsert_site_content_requires_section():
    with pytest.raises(WriteError):
        repository.upsert_site_content("  ", "x", "y")


def test_upload_key_format():
    key = repository.build_upload_key("Foto Equipa.JPG", now=1700000000.5)

    assert re.fullmatch(r"uploads/1700000000500-[a-z0-9]{8}\.jpg", key)


def test_upload_key_without_extension():
    key = repository.build_upload_key("blob")

    assert re.fullmatch(r"uploads/\d+-[a-z0-9]{8}", key)


def test_upload_image_returns_public_url(make_gif):
    url = repository.upload_image(make_gif("capa.gif"))

    assert url.startswith("/media/uploads/")
    assert url.endswith(".gif")


def test_upload_failure_raises_write_error(make_gif):
    with mock.patch(
        "django.core.files.storage.FileSystemStorage.save", side_effect=OSError("disk full"),
    ):
        with pytest.raises(WriteError, match="disk full"):
            repository.upload_image(make_gif())


def test_store_refreshes_after_each_write():
    store = SiteStore()
    assert store.snapshot.partners == []

    partner = store.create("partners", {"name": "Câmara de Viseu"})
    assert [p.pk for p in store.snapshot.partners] == [partner.pk]

    store.update("partners", partner.pk, {"name": "CM Viseu"})
    assert store.snapshot.partners[0].name == "CM Viseu"

    store.delete("partners", partner.pk, confirm=lambda: True)
    assert store.snapshot.partners == []


def test_store_untouched_when_write_fails():
    store = SiteStore()
    before = store.snapshot

    with pytest.raises(WriteError):
        store.create("products", {"name": "Sem preço"})

    assert store.snapshot is before


def test_store_declined_delete_does_not_refresh():
    Product.objects.create(name="Bola", price=Decimal("30"))
    store = SiteStore()
    before = store.snapshot

    assert store.delete("products", before.products[0].pk, confirm=lambda: False) is False
    assert store.snapshot is before


@pytest.mark.parametrize("pk", ["abc", "", None])
def test_update_with_malformed_id(pk):
    with pytest.raises(WriteError):
        repository.update("products", pk, {"name": "x"})


def test_delete_with_malformed_id():
    with pytest.raises(WriteError):
        repository.delete("products", "abc", confirm=lambda: True)
