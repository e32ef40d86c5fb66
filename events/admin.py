from django.contrib import admin

from .models import Tournament, TournamentPlayer


class TournamentPlayerInline(admin.TabularInline):
    model = TournamentPlayer
    can_delete = True
    extra = 0
    fields = ["player", "paid", ]


class TournamentAdmin(admin.ModelAdmin):
    fields = ["date", "course", "number_of_holes", ]
    list_display = ["date", "course", "number_of_holes", ]
    list_filter = ("course", "number_of_holes", )
    date_hierarchy = "date"
    save_on_top = True
    inlines = [TournamentPlayerInline, ]


admin.site.register(Tournament, TournamentAdmin)
