from django.shortcuts import get_object_or_404
from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .exceptions import EmptyPatchError
from .models import Player
from .patch import PlayerPatch
from .serializers import PlayerSerializer, PlayerPatchSerializer


@api_view(("PATCH",))
@permission_classes((permissions.IsAuthenticated,))
def update_player(request, player_id):
    player = get_object_or_404(Player, pk=player_id)

    serializer = PlayerPatchSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    patch = PlayerPatch.from_data(serializer.validated_data)
    if patch.is_empty():
        raise EmptyPatchError()

    patch.apply(player)
    return Response(PlayerSerializer(player).data, status=200)
