import structlog

from django.db import models

logger = structlog.get_logger(__name__)

SETTINGS_ID = 1


class SettingsManager(models.Manager):

    def current_settings(self):
        try:
            return self.get(pk=SETTINGS_ID)
        except self.model.DoesNotExist:
            return None

    def update_fees(self, tournament_fee_18_holes=None, tournament_fee_9_holes=None):
        changes = {}
        if tournament_fee_18_holes is not None:
            changes["tournament_fee_18_holes"] = tournament_fee_18_holes
        if tournament_fee_9_holes is not None:
            changes["tournament_fee_9_holes"] = tournament_fee_9_holes

        if not changes:
            raise ValueError("No settings provided to update")

        settings, _ = self.update_or_create(pk=SETTINGS_ID, defaults=changes)
        logger.info("League settings updated", **{k: str(v) for k, v in changes.items()})
        return settings
