from django.db import models


class PlayerManager(models.Manager):

    def active(self):
        return self.filter(active=True)
