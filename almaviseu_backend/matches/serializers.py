# matches/serializers.py
from django.utils import timezone
from rest_framework import serializers

from .models import Match
from .schedule import is_upcoming


class MatchSerializer(serializers.ModelSerializer):
    is_upcoming = serializers.SerializerMethodField()

    class Meta:
        model = Match
        fields = [
            "id", "date",
            "home_team", "guest_team",
            "location", "category",
            "score_home", "score_guest",
            "is_upcoming",
        ]

    def get_is_upcoming(self, obj):
        now = self.context.get("now") or timezone.now()
        return is_upcoming(obj, now)

    def validate(self, attrs):
        home = attrs.get("score_home", getattr(self.instance, "score_home", None))
        guest = attrs.get("score_guest", getattr(self.instance, "score_guest", None))
        if (home is None) != (guest is None):
            raise serializers.ValidationError("Indique os dois resultados (casa e visitante) ou nenhum.")
        return attrs
