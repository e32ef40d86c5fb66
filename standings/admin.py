from django.contrib import admin

from standings.models import QuotaLedger


class QuotaLedgerAdmin(admin.ModelAdmin):
    fields = ["player", "kind", "slots", ]
    readonly_fields = ["slots", ]
    list_display = ["player", "kind", "updated_at", ]
    list_filter = ("kind", )
    search_fields = ["player__name", ]


admin.site.register(QuotaLedger, QuotaLedgerAdmin)
