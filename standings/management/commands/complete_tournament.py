from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import APIException

from standings.ledger import QuotaLedgerService


class Command(BaseCommand):
    help = 'Roll a finished tournament into every participant\'s quota ledgers'

    def add_arguments(self, parser):
        parser.add_argument("tournament_id", type=int)

    def handle(self, *args, **options):
        try:
            result = QuotaLedgerService().complete_tournament(options["tournament_id"])
        except APIException as e:
            raise CommandError(str(e.detail))
        self.stdout.write(self.style.SUCCESS('Updated quota ledgers for %s players' % result.players_updated))
