from django.contrib import admin
from django.urls import path

from core import views as core_views
from events import views as event_views
from register import views as register_views
from scores import views as scoring_views
from standings import views as standings_views

admin.site.site_header = "npgolf League Administration"

urlpatterns = [
      path("admin/", admin.site.urls),
      path("api/settings/", core_views.league_settings),
      path("api/players/<int:player_id>/", register_views.update_player),
      path("api/scores/", scoring_views.record_scores),
      path("api/scores/tournament/<int:tournament_id>/foursome/<str:group>/", scoring_views.foursome_scores),
      path("api/tournaments/<int:tournament_id>/players/", event_views.tournament_players),
      path("api/tournaments/<int:tournament_id>/players/<int:player_id>/", event_views.tournament_player),
      path("api/tournaments/<int:tournament_id>/available-players/", event_views.available_players),
      path("api/leaderboard/<int:tournament_id>/", standings_views.leaderboard),
      path("api/leaderboard/<int:tournament_id>/prizes/", standings_views.prize_summary),
      path("api/tournaments/<int:tournament_id>/complete/", standings_views.complete_tournament),
]
