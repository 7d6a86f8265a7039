from datetime import timedelta

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from rest_framework.test import APIClient

from content.models import NewsItem
from matches.models import Match
from teams.models import Team, TeamMember

# GIF 1x1 valide (accepté par Pillow / forms.ImageField)
GIF_BYTES = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04"
    b"\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)


@pytest.fixture
def make_gif():
    def _make(name="photo.GIF"):
        return SimpleUploadedFile(name, GIF_BYTES, content_type="image/gif")
    return _make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_api_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def team(db):
    return Team.objects.create(name="Séniores A", category="Séniores Masculinos")


@pytest.fixture
def roster(team):
    other = Team.objects.create(name="Juniores", category="Juniores")
    return {
        "team": team,
        "other": other,
        "members": [
            TeamMember.objects.create(team=team, name="Rui", number="7", position="Distribuidor"),
            TeamMember.objects.create(team=other, name="Ana", number="3"),
            TeamMember.objects.create(team=team, name="bruno", number="10", position="Libero"),
        ],
    }


@pytest.fixture
def matches(db):
    now = timezone.now()
    return {
        "past": Match.objects.create(
            date=now - timedelta(days=3), home_team="ALMA", guest_team="Ac. Espinho",
            score_home=3, score_guest=1,
        ),
        "older": Match.objects.create(
            date=now - timedelta(days=10), home_team="Leixões", guest_team="ALMA",
            score_home=2, score_guest=3,
        ),
        "soon": Match.objects.create(date=now + timedelta(days=2), home_team="ALMA", guest_team="Benfica"),
        "later": Match.objects.create(date=now + timedelta(days=9), home_team="Sporting", guest_team="ALMA"),
    }


@pytest.fixture
def news(db):
    first = NewsItem.objects.create(title="Primeira", content="<p>a</p>")
    second = NewsItem.objects.create(title="Segunda", content="<p>b</p>")
    base = timezone.now()
    # auto_now_add : on fixe created_at après coup
    NewsItem.objects.filter(pk=first.pk).update(created_at=base - timedelta(days=2))
    NewsItem.objects.filter(pk=second.pk).update(created_at=base - timedelta(days=1))
    return first, second
