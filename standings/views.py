from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from standings.leaderboard import LeaderboardService
from standings.ledger import QuotaLedgerService


@api_view(("GET",))
def leaderboard(request, tournament_id):
    result = LeaderboardService().compute_leaderboard(tournament_id)
    return Response([entry.to_dict() for entry in result.entries], status=200)


@api_view(("GET",))
def prize_summary(request, tournament_id):
    result = LeaderboardService().compute_leaderboard(tournament_id)
    return Response(result.to_dict(), status=200)


@api_view(("POST",))
@permission_classes((permissions.IsAuthenticated,))
def complete_tournament(request, tournament_id):
    result = QuotaLedgerService().complete_tournament(tournament_id)
    return Response(result.to_dict(), status=200)
