from django.contrib import admin

from .models import Player


class PlayerAdmin(admin.ModelAdmin):
    fields = ["name", "email", "phone", "sex", "quota", "active", "role",
              "fedex_points", "tournaments_played", "prize_money", ]
    list_display = ["name", "email", "sex", "quota", "fedex_points", "tournaments_played", "prize_money", "active", ]
    list_filter = ("active", "role", "sex", )
    search_fields = ["name", "email", ]
    ordering = ["name", ]
    save_on_top = True


admin.site.register(Player, PlayerAdmin)
