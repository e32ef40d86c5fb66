from django.contrib import admin

from scores.models import Score


class ScoreAdmin(admin.ModelAdmin):
    fields = ["tournament", "player", "hole", "score", "quota", "foursome_group", ]
    list_display = ["tournament", "player", "hole", "score", "quota", "foursome_group", ]
    list_filter = ("tournament", "foursome_group", )
    search_fields = ["player__name", ]
    save_on_top = True


admin.site.register(Score, ScoreAdmin)
