from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from scores.exceptions import EmptyScoresError
from scores.models import Score
from scores.serializers import ScoreSerializer, ScoreEntrySerializer


@api_view(("POST",))
@permission_classes((permissions.IsAuthenticated,))
def record_scores(request):
    scores = request.data.get("scores")
    if not isinstance(scores, list) or len(scores) == 0:
        raise EmptyScoresError()

    serializer = ScoreEntrySerializer(data=scores, many=True)
    serializer.is_valid(raise_exception=True)

    saved = Score.objects.record_scores(serializer.validated_data)
    return Response({"message": "Scores saved successfully", "scores": ScoreSerializer(saved, many=True).data},
                    status=201)


@api_view(("GET",))
def foursome_scores(request, tournament_id, group):
    scores = Score.objects.for_foursome(tournament_id, group)
    return Response(ScoreSerializer(scores, many=True).data, status=200)
