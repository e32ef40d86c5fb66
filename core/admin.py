from django.contrib import admin

from .models import LeagueSettings


class LeagueSettingsAdmin(admin.ModelAdmin):
    fields = ["tournament_fee_18_holes", "tournament_fee_9_holes", ]
    list_display = ["id", "tournament_fee_18_holes", "tournament_fee_9_holes", "updated_at", ]

    def has_add_permission(self, request):
        return not LeagueSettings.objects.exists()


admin.site.register(LeagueSettings, LeagueSettingsAdmin)
