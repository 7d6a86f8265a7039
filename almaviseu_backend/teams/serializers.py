# teams/serializers.py
from rest_framework import serializers
from .models import Team, TeamMember


class TeamMemberSerializer(serializers.ModelSerializer):
    team_id = serializers.PrimaryKeyRelatedField(source="team", queryset=Team.objects.all())

    class Meta:
        model = TeamMember
        fields = ["id", "team_id", "name", "number", "position", "image_url"]


class TeamSerializer(serializers.ModelSerializer):
    class Meta:
        model = Team
        fields = ["id", "name", "category", "description", "image_url", "coaches"]
