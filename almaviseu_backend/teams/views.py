# teams/views.py
from rest_framework.decorators import action
from rest_framework.response import Response

from cms.api import RepositoryViewSet
from .models import TeamMember
from .roster import resolve_roster, sort_members
from .serializers import TeamSerializer, TeamMemberSerializer


class TeamViewSet(RepositoryViewSet):
    """
    /api/teams/
    /api/teams/{id}/roster/  -> plantel de l'équipe
    """
    table = "teams"
    serializer_class = TeamSerializer

    @action(detail=True, methods=["get"])
    def roster(self, request, pk=None):
        team = self.get_object()
        members = sort_members(TeamMember.objects.all())
        roster = resolve_roster(team, members)
        return Response(TeamMemberSerializer(roster, many=True).data)


class TeamMemberViewSet(RepositoryViewSet):
    """
    /api/team-members/
      - ?team=<id>   -> ne renvoie que le plantel de cette équipe
    """
    table = "team_members"
    serializer_class = TeamMemberSerializer

    def get_queryset(self):
        qs = super().get_queryset()
        raw = self.request.query_params.get("team") or self.request.query_params.get("team_id")
        if raw and str(raw).strip().isdigit():
            qs = qs.filter(team_id=int(raw))
        return qs
