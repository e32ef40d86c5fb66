from django.shortcuts import get_object_or_404
from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from register.models import Player
from register.serializers import PlayerSerializer
from .models import Tournament, TournamentPlayer
from .serializers import RosterEntrySerializer, AddPlayerSerializer, PaidSerializer


@api_view(("GET", "POST", ))
@permission_classes((permissions.IsAuthenticatedOrReadOnly,))
def tournament_players(request, tournament_id):
    tournament = get_object_or_404(Tournament, pk=tournament_id)

    if request.method == "GET":
        roster = TournamentPlayer.objects \
            .filter(tournament=tournament) \
            .select_related("player") \
            .order_by("player__name")
        return Response(RosterEntrySerializer(roster, many=True).data, status=200)

    serializer = AddPlayerSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    player = get_object_or_404(Player, pk=serializer.validated_data["player_id"])

    entry = TournamentPlayer.objects.add_player(tournament, player, paid=serializer.validated_data["paid"])
    return Response(RosterEntrySerializer(entry).data, status=201)


@api_view(("PATCH", "DELETE", ))
@permission_classes((permissions.IsAuthenticated,))
def tournament_player(request, tournament_id, player_id):
    tournament = get_object_or_404(Tournament, pk=tournament_id)
    player = get_object_or_404(Player, pk=player_id)

    if request.method == "DELETE":
        TournamentPlayer.objects.remove_player(tournament, player)
        return Response({"message": "Player removed from tournament successfully"}, status=200)

    serializer = PaidSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    TournamentPlayer.objects.mark_paid(tournament, player, paid=serializer.validated_data["paid"])

    entry = TournamentPlayer.objects.select_related("player").get(tournament=tournament, player=player)
    return Response(RosterEntrySerializer(entry).data, status=200)


@api_view(("GET", ))
def available_players(request, tournament_id):
    tournament = get_object_or_404(Tournament, pk=tournament_id)
    players = TournamentPlayer.objects.available_players(tournament)
    return Response(PlayerSerializer(players, many=True).data, status=200)
