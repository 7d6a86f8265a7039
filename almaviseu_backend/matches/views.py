# matches/views.py
from django.conf import settings
from django.utils import timezone
from rest_framework.decorators import action
from rest_framework.response import Response

from cms.api import RepositoryViewSet
from .schedule import partition_matches
from .serializers import MatchSerializer


class MatchViewSet(RepositoryViewSet):
    """
    Endpoints:
      - /api/matches/            (tous, par date croissante)
      - /api/matches/{id}/
      - /api/matches/upcoming/   (date >= maintenant, croissant)
      - /api/matches/results/    (date <  maintenant, décroissant)
    """
    table = "matches"
    serializer_class = MatchSerializer

    def _limit(self, request):
        raw = request.query_params.get("limit") or request.query_params.get("page_size")
        try:
            return max(int(raw), 0)
        except (TypeError, ValueError):
            return settings.CALENDAR_LIMIT

    def _partition(self):
        now = timezone.now()
        return now, partition_matches(self.get_queryset(), now)

    def _respond(self, request, matches, now):
        context = {**self.get_serializer_context(), "now": now}
        serializer = self.get_serializer(matches[: self._limit(request)], many=True, context=context)
        return Response(serializer.data)

    @action(detail=False, methods=["get"])
    def upcoming(self, request):
        now, (upcoming, _) = self._partition()
        return self._respond(request, upcoming, now)

    @action(detail=False, methods=["get"])
    def results(self, request):
        now, (_, past) = self._partition()
        return self._respond(request, past, now)
