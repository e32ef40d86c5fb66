from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from standings.exceptions import SettingsNotFoundError
from .models import LeagueSettings
from .serializers import LeagueSettingsSerializer, FeePatchSerializer


@api_view(("GET", "PATCH", ))
@permission_classes((permissions.IsAuthenticatedOrReadOnly,))
def league_settings(request):
    if request.method == "GET":
        settings = LeagueSettings.objects.current_settings()
        if settings is None:
            raise SettingsNotFoundError()
        return Response(LeagueSettingsSerializer(settings).data, status=200)

    serializer = FeePatchSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    try:
        settings = LeagueSettings.objects.update_fees(**serializer.validated_data)
    except ValueError as e:
        raise ValidationError(str(e))

    return Response(LeagueSettingsSerializer(settings).data, status=200)
