# matches/admin.py
from django.contrib import admin
from django.utils import timezone

from .models import Match
from .schedule import is_upcoming


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "date",
        "category",
        "home_team",
        "score_home",
        "score_guest",
        "guest_team",
        "location",
        "upcoming",
    )
    list_filter = ("category", "date")
    search_fields = ("home_team", "guest_team", "location")
    date_hierarchy = "date"

    @admin.display(boolean=True, description="Por jogar")
    def upcoming(self, obj):
        return is_upcoming(obj, timezone.now())
